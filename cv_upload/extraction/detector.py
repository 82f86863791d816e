from cv_upload.extraction.models import DocumentFormat

SUFFIXES: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
    ".txt": DocumentFormat.TEXT,
}


def detect_format(file_name: str, case_sensitive: bool = False) -> DocumentFormat:
    """Classify a file by its name suffix only. No content sniffing."""
    name = file_name if case_sensitive else file_name.lower()
    for suffix, document_format in SUFFIXES.items():
        if name.endswith(suffix):
            return document_format
    return DocumentFormat.UNSUPPORTED
