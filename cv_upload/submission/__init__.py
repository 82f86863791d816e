from cv_upload.submission.base import BaseSubmissionClient
from cv_upload.submission.factory import SubmissionClientFactory
from cv_upload.submission.http_client import HttpSubmissionClient

__all__ = ["BaseSubmissionClient", "HttpSubmissionClient", "SubmissionClientFactory"]
