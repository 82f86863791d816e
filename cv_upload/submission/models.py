import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionPayload:
    """JSON body sent to the ingestion endpoint."""

    cv_text: str
    candidate_id: str


@dataclass(frozen=True)
class Ack:
    """Confirmation that the remote service accepted the text."""

    status_code: int


class CancellationToken:
    """Thread-safe flag a host can trip to abandon an in-flight submission."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
