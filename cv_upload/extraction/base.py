from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for every format-specific text extractor."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Convert a raw document payload into a single text string.

        Args:
            content: Raw file content of the kind this extractor handles.

        Returns:
            The extracted text.

        Raises:
            ExtractionError: if the payload cannot be parsed.
        """
