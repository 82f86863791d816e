from abc import ABC, abstractmethod

from cv_upload.submission.models import Ack, CancellationToken


class BaseSubmissionClient(ABC):
    """Contract for clients that deliver extracted text to the ingestion service."""

    @abstractmethod
    def submit(self, text: str, cancel_token: CancellationToken | None = None) -> Ack:
        """Send ``text`` and wait for the remote acknowledgment.

        Args:
            text: The full extracted text of one document.
            cancel_token: Optional token; once cancelled the call raises
                SubmissionCancelledError instead of acknowledging.

        Returns:
            Ack for a confirmed successful delivery.

        Raises:
            SubmissionError: on any failure.
        """

    def close(self) -> None:
        """Release any underlying resources."""
