from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DocumentFormat(Enum):
    """Closed set of document kinds the extraction pipeline understands."""

    PDF = "pdf"
    DOCX = "docx"
    TEXT = "txt"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class SelectedFile:
    """A file picked by the user: its declared name plus where its bytes live.

    Exactly one of ``path`` and ``data`` is expected to be set.
    """

    name: str
    path: Path | None = None
    data: bytes | None = None

    @classmethod
    def from_path(cls, path: Path) -> "SelectedFile":
        return cls(name=path.name, path=path)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "SelectedFile":
        return cls(name=name, data=data)
