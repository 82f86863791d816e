import threading
from collections.abc import Callable

from cv_upload.config.settings import Settings
from cv_upload.extraction.dispatcher import ExtractionDispatcher, build_dispatcher
from cv_upload.extraction.exceptions import EmptyDocumentError, ExtractionError
from cv_upload.extraction.models import SelectedFile
from cv_upload.logging.logger import Log
from cv_upload.session.exceptions import InvalidTransitionError
from cv_upload.session.models import (
    BUSY_STATUSES,
    SessionSnapshot,
    SessionStatus,
    UploadSession,
)
from cv_upload.submission.base import BaseSubmissionClient
from cv_upload.submission.exceptions import GENERIC_FAILURE_MESSAGE, SubmissionError
from cv_upload.submission.factory import SubmissionClientFactory
from cv_upload.submission.models import CancellationToken

SessionListener = Callable[[SessionSnapshot], None]

_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.IDLE: frozenset({SessionStatus.EXTRACTING}),
    SessionStatus.EXTRACTING: frozenset({SessionStatus.SUBMITTING, SessionStatus.FAILED}),
    SessionStatus.SUBMITTING: frozenset({SessionStatus.SUCCEEDED, SessionStatus.FAILED}),
    SessionStatus.SUCCEEDED: frozenset({SessionStatus.EXTRACTING, SessionStatus.IDLE}),
    SessionStatus.FAILED: frozenset({SessionStatus.EXTRACTING, SessionStatus.IDLE}),
}


class UploadStateMachine:
    """Runs one upload attempt at a time: extract -> submit -> outcome.

    This is the only writer of the UploadSession. Extraction and submission
    errors are converted into the FAILED state here and never reach the
    caller. Observers get a SessionSnapshot after every transition.
    """

    def __init__(
        self,
        dispatcher: ExtractionDispatcher,
        client: BaseSubmissionClient,
    ) -> None:
        self._dispatcher = dispatcher
        self._client = client
        self._session = UploadSession()
        self._listeners: list[SessionListener] = []
        self._lock = threading.RLock()
        self._cancel_token: CancellationToken | None = None

    @property
    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            file_name=self._session.file_name,
            extracted_text=self._session.extracted_text,
            status=self._session.status,
            error_message=self._session.error_message,
        )

    @property
    def file_selection_enabled(self) -> bool:
        return self._session.status not in BUSY_STATUSES

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def select_file(self, file: SelectedFile) -> bool:
        """Start a new attempt for ``file`` and run it to a terminal state.

        Returns False, without touching the session, when an attempt is
        already extracting or submitting.
        """
        with self._lock:
            if not self.file_selection_enabled:
                Log.warning(
                    f"Ignoring '{file.name}': '{self._session.file_name}' is still "
                    f"{self._session.status.value}"
                )
                return False
            self._transition(
                SessionStatus.EXTRACTING,
                file=file,
                file_name=file.name,
                extracted_text="",
                error_message="",
            )

        text = self._extract(file)
        if text is not None:
            self._submit(text)
        return True

    def reset(self) -> None:
        """Return a finished session to IDLE."""
        with self._lock:
            if self._session.status is SessionStatus.IDLE:
                return
            self._transition(
                SessionStatus.IDLE,
                file=None,
                file_name="",
                extracted_text="",
                error_message="",
            )

    def cancel_submission(self) -> bool:
        """Trip the token of the in-flight submission, if there is one."""
        token = self._cancel_token
        if token is None:
            return False
        Log.warning(f"Cancelling submission of '{self._session.file_name}'")
        token.cancel()
        return True

    def close(self) -> None:
        self._client.close()

    def _extract(self, file: SelectedFile) -> str | None:
        try:
            text = self._dispatcher.extract(file)
            if not text.strip():
                raise EmptyDocumentError(
                    f"'{file.name}' has no selectable text; scanned images cannot be read"
                )
        except ExtractionError as exc:
            Log.error(f"Extraction failed for '{file.name}': {exc}")
            self._fail(str(exc))
            return None
        except Exception as exc:
            Log.error(f"Unexpected extraction failure for '{file.name}': {exc!r}")
            self._fail(GENERIC_FAILURE_MESSAGE)
            return None
        finally:
            self._session.file = None

        self._transition(SessionStatus.SUBMITTING, extracted_text=text)
        return text

    def _submit(self, text: str) -> None:
        self._cancel_token = CancellationToken()
        try:
            ack = self._client.submit(text, cancel_token=self._cancel_token)
        except SubmissionError as exc:
            self._fail(str(exc))
            return
        except Exception as exc:
            Log.error(f"Unexpected submission failure: {exc!r}")
            self._fail(GENERIC_FAILURE_MESSAGE)
            return
        finally:
            self._cancel_token = None

        Log.info(f"'{self._session.file_name}' acknowledged with HTTP {ack.status_code}")
        self._transition(SessionStatus.SUCCEEDED)

    def _fail(self, message: str) -> None:
        self._transition(
            SessionStatus.FAILED,
            error_message=message or GENERIC_FAILURE_MESSAGE,
            file_name="",
            extracted_text="",
        )

    def _transition(self, target: SessionStatus, **changes: object) -> None:
        current = self._session.status
        if target not in _TRANSITIONS[current]:
            raise InvalidTransitionError(
                f"Cannot move upload session from {current.value} to {target.value}"
            )
        for name, value in changes.items():
            setattr(self._session, name, value)
        self._session.status = target
        Log.info(f"Upload session {current.value} -> {target.value}")
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as exc:
                Log.error(f"Session listener {listener!r} failed: {exc}")


def build_state_machine(settings: Settings) -> UploadStateMachine:
    """Build a state machine with the configured dispatcher and client."""
    return UploadStateMachine(
        dispatcher=build_dispatcher(settings),
        client=SubmissionClientFactory.create(settings),
    )
