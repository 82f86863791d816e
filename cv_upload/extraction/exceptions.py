ACCEPTED_FORMATS_HINT = "Please upload a PDF, DOCX or TXT file."


class ExtractionError(Exception):
    """Base exception for everything that can go wrong turning a file into text."""


class UnsupportedFormatError(ExtractionError):
    """Raised when the file name suffix is not one of the accepted kinds."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Unsupported file '{file_name}'. {ACCEPTED_FORMATS_HINT}")
        self.file_name = file_name


class FileReadError(ExtractionError):
    """Raised when the selected file cannot be read from its source."""


class EmptyDocumentError(ExtractionError):
    """Raised when a document was parsed but contains no readable text."""
