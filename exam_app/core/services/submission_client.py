"""Uploads the finished report to the submission endpoint."""

from __future__ import annotations

import logging

import requests

from exam_app.constants.network_constants import (
    API_BASE_URL,
    REPORT_MIME_TYPE,
    REQUEST_TIMEOUT_SECONDS,
    SUBMIT_FILE_FIELD,
    SUBMIT_PATH,
)
from exam_app.core.errors import SubmissionFailedError, SubmissionNetworkError
from exam_app.core.models import SubmissionMeta

logger = logging.getLogger(__name__)


def build_form_fields(meta: SubmissionMeta) -> dict[str, str]:
    """Scalar multipart fields sent alongside the document."""
    return {
        "name": meta.participant_name,
        "startedAt": meta.started_at,
        "finishedAt": meta.finished_at,
        "duration": meta.duration,
        "total": str(meta.total),
        "correct": str(meta.correct),
    }


class SubmissionClient:
    """Performs the single multipart POST of a finished exam. Never retries."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}{SUBMIT_PATH}"
        self._session = session or requests.Session()
        self._timeout = timeout

    def submit(self, content: bytes, filename: str, meta: SubmissionMeta) -> None:
        files = {SUBMIT_FILE_FIELD: (filename, content, REPORT_MIME_TYPE)}
        try:
            response = self._session.post(
                self._url,
                data=build_form_fields(meta),
                files=files,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("Submission of %s failed before a response: %s", filename, exc)
            raise SubmissionNetworkError(str(exc)) from exc

        if not response.ok:
            body = _read_body(response)
            logger.error("Submit failed: %s %s", response.status_code, body)
            raise SubmissionFailedError(response.status_code, body)

        logger.info("Report %s submitted", filename)


def _read_body(response: requests.Response) -> str | None:
    try:
        return response.text
    except (requests.RequestException, UnicodeDecodeError):
        return None
