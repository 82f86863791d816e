"""Offline submission client.

Acknowledges every submission without touching the network. Useful for local
development and as a template for new delivery backends.
"""

from cv_upload.logging.logger import Log
from cv_upload.submission.base import BaseSubmissionClient
from cv_upload.submission.exceptions import SubmissionCancelledError
from cv_upload.submission.models import Ack, CancellationToken


class ExampleSubmissionClient(BaseSubmissionClient):
    """Records submitted texts in memory and always acknowledges."""

    def __init__(self) -> None:
        self.submitted: list[str] = []

    def submit(self, text: str, cancel_token: CancellationToken | None = None) -> Ack:
        if cancel_token is not None and cancel_token.cancelled:
            raise SubmissionCancelledError("Upload cancelled")
        self.submitted.append(text)
        Log.debug(f"Example client accepted {len(text)} chars")
        return Ack(status_code=200)
