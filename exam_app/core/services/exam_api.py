"""HTTP client for the verification and question-bank services."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError as PydanticValidationError

from exam_app.constants.network_constants import (
    API_BASE_URL,
    QUESTIONS_PATH,
    REQUEST_TIMEOUT_SECONDS,
    VERIFY_PATH,
)
from exam_app.core.errors import QuestionFetchError, TransientNetworkError
from exam_app.core.models import Question
from exam_app.core.schemas import QuestionPayload, VerifyRequest, VerifyResponse

logger = logging.getLogger(__name__)


class ExamApiClient:
    """Talks to `POST /verify` and `GET /tests`."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def verify(self, name: str, code: str) -> bool:
        """Return whether the access gate lets the participant in.

        Raises:
            TransientNetworkError: The request failed or the body was not JSON.
        """
        payload = VerifyRequest(name=name.strip(), code=code.strip())
        url = f"{self._base_url}{VERIFY_PATH}"
        try:
            response = self._session.post(url, json=payload.model_dump(), timeout=self._timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Verification request to %s failed: %s", url, exc)
            raise TransientNetworkError(str(exc)) from exc

        if not isinstance(data, dict):
            return False
        return VerifyResponse.model_validate(data).access

    def fetch_questions(self, limit: int) -> tuple[Question, ...]:
        """Fetch at most `limit` questions in bank order.

        Raises:
            QuestionFetchError: Non-success status or an invalid question payload.
            TransientNetworkError: The request never produced a response.
        """
        url = f"{self._base_url}{QUESTIONS_PATH}"
        try:
            response = self._session.get(url, params={"limit": limit}, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Question request to %s failed: %s", url, exc)
            raise TransientNetworkError(str(exc)) from exc

        if not response.ok:
            raise QuestionFetchError(
                f"Question bank answered HTTP {response.status_code}",
                status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise QuestionFetchError("Question bank returned invalid JSON") from exc

        if not isinstance(data, list):
            logger.warning("Question bank returned %s instead of a list", type(data).__name__)
            return ()

        try:
            questions = tuple(QuestionPayload.model_validate(item).to_question() for item in data)
        except PydanticValidationError as exc:
            raise QuestionFetchError(f"Invalid question payload: {exc}") from exc

        seen: set[object] = set()
        for question in questions:
            if question.id in seen:
                raise QuestionFetchError(f"Duplicate question id {question.id!r}")
            seen.add(question.id)

        logger.info("Fetched %d questions", len(questions))
        return questions
