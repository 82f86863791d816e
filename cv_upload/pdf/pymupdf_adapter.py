import pymupdf

from cv_upload.pdf.base import BasePdfExtractor
from cv_upload.pdf.exceptions import PdfExtractionError

# Index of the word string in the tuples returned by Page.get_text("words").
_WORD_TEXT = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    [word[_WORD_TEXT] for word in page.get_text("words")]
                    for page in doc
                ]
        except Exception as exc:
            raise PdfExtractionError(f"Could not read the PDF file: {exc}") from exc
        return self.join_pages(pages)
