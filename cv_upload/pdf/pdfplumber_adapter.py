import io

import pdfplumber

from cv_upload.pdf.base import BasePdfExtractor
from cv_upload.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber word boxes."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [
                    [word["text"] for word in page.extract_words()]
                    for page in pdf.pages
                ]
        except Exception as exc:
            raise PdfExtractionError(f"Could not read the PDF file: {exc}") from exc
        return self.join_pages(pages)
