GENERIC_FAILURE_MESSAGE = "Upload failed"


class SubmissionError(Exception):
    """Raised when the remote service did not acknowledge the submission."""

    def __init__(
        self,
        message: str = GENERIC_FAILURE_MESSAGE,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class SubmissionNetworkError(SubmissionError):
    """Raised when the remote service is unreachable, times out, or answers garbage."""


class SubmissionCancelledError(SubmissionError):
    """Raised when the submission was cancelled through its token."""
