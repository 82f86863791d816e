from collections.abc import Mapping

from cv_upload.config.settings import Settings
from cv_upload.extraction.base import BaseTextExtractor
from cv_upload.extraction.detector import detect_format
from cv_upload.extraction.docx_extractor import DocxExtractor
from cv_upload.extraction.exceptions import UnsupportedFormatError
from cv_upload.extraction.file_loader import FileLoader
from cv_upload.extraction.models import DocumentFormat, SelectedFile
from cv_upload.extraction.text_extractor import PlainTextExtractor
from cv_upload.logging.logger import Log
from cv_upload.pdf.factory import PdfExtractorFactory


class ExtractionDispatcher:
    """Routes a selected file to the one extractor registered for its format.

    Extractor failures propagate unchanged; callers see a single
    ExtractionError channel whether the dispatcher or the extractor failed.
    """

    def __init__(
        self,
        extractors: Mapping[DocumentFormat, BaseTextExtractor],
        file_loader: FileLoader | None = None,
        case_sensitive: bool = False,
    ) -> None:
        self._extractors = dict(extractors)
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._case_sensitive = case_sensitive

    def extract(self, file: SelectedFile) -> str:
        """Return the text of ``file``.

        Raises:
            UnsupportedFormatError: if the name suffix is not accepted. No file
                content is read and no extractor is called in that case.
            ExtractionError: if reading or parsing the file fails.
        """
        document_format = detect_format(file.name, case_sensitive=self._case_sensitive)
        extractor = self._extractors.get(document_format)
        if extractor is None:
            raise UnsupportedFormatError(file.name)

        content = self._file_loader.load(file)
        Log.debug(
            f"Extracting {document_format.value} text from '{file.name}' "
            f"({len(content)} bytes)"
        )
        text = extractor.extract(content)
        Log.info(f"Extracted {len(text)} chars from '{file.name}'")
        return text


def build_dispatcher(settings: Settings) -> ExtractionDispatcher:
    """Build a dispatcher wired with the configured extractors."""
    return ExtractionDispatcher(
        extractors={
            DocumentFormat.PDF: PdfExtractorFactory.create(settings),
            DocumentFormat.DOCX: DocxExtractor(),
            DocumentFormat.TEXT: PlainTextExtractor(),
        },
        case_sensitive=settings.suffix_case_sensitive,
    )
