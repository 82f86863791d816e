from abc import abstractmethod

from cv_upload.extraction.base import BaseTextExtractor


class BasePdfExtractor(BaseTextExtractor):
    """Contract for all PDF text extraction adapters.

    Output layout is shared by every engine: for each page, in page order,
    the page's text fragments joined by single spaces, followed by a newline.
    A blank page therefore contributes just ``"\\n"``.
    """

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract page-ordered text from PDF bytes.

        Raises:
            PdfExtractionError: if the payload is not a readable PDF.
        """

    @staticmethod
    def join_pages(pages: list[list[str]]) -> str:
        return "".join(" ".join(fragments) + "\n" for fragments in pages)
