"""Exception hierarchy for the exam client.

Services raise these; ExamSession catches them at the boundary of the action
or event that triggered the work and turns them into a user-facing Notice.
"""

from __future__ import annotations

from exam_app.constants.ui_constants import (
    QUESTIONS_LOAD_FAILED_MESSAGE,
    REPORT_FAILED_MESSAGE,
    SUBMISSION_FAILED_MESSAGE,
    VERIFY_DENIED_MESSAGE,
    VERIFY_EMPTY_NAME_MESSAGE,
    VERIFY_NETWORK_MESSAGE,
)


class ExamClientError(Exception):
    """Base class for all recoverable exam client failures."""

    user_message: str = VERIFY_NETWORK_MESSAGE

    def __init__(self, detail: str = "", *, user_message: str | None = None) -> None:
        super().__init__(detail or self.user_message)
        if user_message is not None:
            self.user_message = user_message


class ValidationError(ExamClientError):
    """Raised when the participant name is empty after trimming."""

    user_message = VERIFY_EMPTY_NAME_MESSAGE


class VerificationDeniedError(ExamClientError):
    """Raised when the verification service answers without access."""

    user_message = VERIFY_DENIED_MESSAGE


class TransientNetworkError(ExamClientError):
    """Raised for connection-level failures of verify or question fetch."""

    user_message = VERIFY_NETWORK_MESSAGE


class QuestionFetchError(ExamClientError):
    """Raised when the question bank answers with an error or bad payload."""

    user_message = QUESTIONS_LOAD_FAILED_MESSAGE

    def __init__(self, detail: str = "", *, status: int | None = None) -> None:
        super().__init__(detail)
        self.status = status


class ReportGenerationError(ExamClientError):
    """Raised when the PDF renderer fails; the submission is skipped."""

    user_message = REPORT_FAILED_MESSAGE


class SubmissionFailedError(ExamClientError):
    """Raised when the submission endpoint answers with a non-success status."""

    user_message = SUBMISSION_FAILED_MESSAGE

    def __init__(self, status: int, body: str | None = None) -> None:
        detail = f"Submission rejected with HTTP {status}"
        if body:
            detail = f"{detail}: {body}"
        super().__init__(detail)
        self.status = status
        self.body = body


class SubmissionNetworkError(ExamClientError):
    """Raised when the submission request never produced a response."""

    user_message = SUBMISSION_FAILED_MESSAGE
