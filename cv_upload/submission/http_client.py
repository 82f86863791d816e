from dataclasses import asdict

import httpx

from cv_upload.logging.logger import Log
from cv_upload.submission.base import BaseSubmissionClient
from cv_upload.submission.exceptions import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionCancelledError,
    SubmissionError,
    SubmissionNetworkError,
)
from cv_upload.submission.models import Ack, CancellationToken, SubmissionPayload


class HttpSubmissionClient(BaseSubmissionClient):
    """Posts extracted text as JSON to the remote ingestion endpoint."""

    def __init__(
        self,
        *,
        url: str,
        candidate_id: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._candidate_id = candidate_id
        self._client = httpx.Client(
            timeout=timeout_seconds,
            transport=transport,
            follow_redirects=True,
        )

    def submit(self, text: str, cancel_token: CancellationToken | None = None) -> Ack:
        payload = SubmissionPayload(cv_text=text, candidate_id=self._candidate_id)
        self._raise_if_cancelled(cancel_token)

        try:
            response = self._client.post(self._url, json=asdict(payload))
        except httpx.TimeoutException as exc:
            Log.error(f"Submission to {self._url} timed out: {exc}")
            raise SubmissionNetworkError() from exc
        except httpx.HTTPError as exc:
            Log.error(f"Submission to {self._url} failed: {exc}")
            raise SubmissionNetworkError() from exc

        self._raise_if_cancelled(cancel_token)
        body = self._parse_body(response)

        if not response.is_success:
            Log.error(f"Submission rejected with HTTP {response.status_code}")
            raise SubmissionError(
                self._detail_message(body),
                status_code=response.status_code,
            )

        Log.info(f"Submission acknowledged with HTTP {response.status_code}")
        return Ack(status_code=response.status_code)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _raise_if_cancelled(cancel_token: CancellationToken | None) -> None:
        if cancel_token is not None and cancel_token.cancelled:
            raise SubmissionCancelledError("Upload cancelled")

    @staticmethod
    def _parse_body(response: httpx.Response) -> object:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            Log.error(f"Malformed response body with HTTP {response.status_code}: {exc}")
            raise SubmissionNetworkError(status_code=response.status_code) from exc

    @staticmethod
    def _detail_message(body: object) -> str:
        if isinstance(body, dict):
            detail = body.get("detail")
            if isinstance(detail, str) and detail:
                return detail
        return GENERIC_FAILURE_MESSAGE
