from cv_upload.config.settings import Settings
from cv_upload.submission.base import BaseSubmissionClient
from cv_upload.submission.example_client import ExampleSubmissionClient
from cv_upload.submission.http_client import HttpSubmissionClient


class SubmissionClientFactory:
    """Creates the configured submission client."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseSubmissionClient:
        provider = settings.submission_provider.lower()
        if provider == "example":
            return ExampleSubmissionClient()
        if provider == "http":
            candidate_id = settings.candidate_id.strip()
            if not candidate_id:
                raise ValueError("candidate_id is required for submission_provider=http")
            return HttpSubmissionClient(
                url=settings.submission_url,
                candidate_id=candidate_id,
                timeout_seconds=settings.submission_timeout_seconds,
            )
        raise ValueError(
            f"Unknown submission provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
