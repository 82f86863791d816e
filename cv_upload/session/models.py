from dataclasses import dataclass
from enum import Enum

from cv_upload.extraction.models import SelectedFile


class SessionStatus(Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


BUSY_STATUSES = frozenset({SessionStatus.EXTRACTING, SessionStatus.SUBMITTING})


@dataclass
class UploadSession:
    """Mutable state of the one live upload attempt. Owned by UploadStateMachine."""

    file: SelectedFile | None = None
    file_name: str = ""
    extracted_text: str = ""
    status: SessionStatus = SessionStatus.IDLE
    error_message: str = ""


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of an UploadSession handed to observers."""

    file_name: str
    extracted_text: str
    status: SessionStatus
    error_message: str

    @property
    def busy(self) -> bool:
        return self.status in BUSY_STATUSES
