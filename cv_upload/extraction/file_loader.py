from cv_upload.extraction.exceptions import FileReadError
from cv_upload.extraction.models import SelectedFile


class FileLoader:
    """Reads the bytes behind a SelectedFile."""

    def load(self, file: SelectedFile) -> bytes:
        """Return the file content, from memory or from disk.

        Raises:
            FileReadError: if the file is missing or cannot be read.
        """
        if file.data is not None:
            return file.data
        if file.path is None:
            raise FileReadError(f"File '{file.name}' has no content to read")
        if not file.path.exists():
            raise FileReadError(f"File not found: {file.path}")
        try:
            return file.path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Could not read '{file.name}': {exc}") from exc
