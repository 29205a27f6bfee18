"""State machine for a single exam run: Verify -> Rules -> Running -> Finished."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from exam_app.constants.exam_constants import (
    EXAM_DURATION_SECONDS,
    QUESTION_LIMIT,
    REPORT_SUBMIT_DELAY_MS,
)
from exam_app.constants.ui_constants import (
    FINISH_CONFIRM_MESSAGE,
    QUESTIONS_LOAD_FAILED_MESSAGE,
    REPORT_FAILED_MESSAGE,
    SUBMISSION_SUCCESS_MESSAGE,
    VIOLATION_WARNING_MESSAGE,
)
from exam_app.core.errors import (
    ExamClientError,
    TransientNetworkError,
    ValidationError,
    VerificationDeniedError,
)
from exam_app.core.events import (
    BackgroundFailed,
    ClockExpired,
    ClockTicked,
    FocusLost,
    QuestionsLoaded,
    SessionEvent,
    SubmissionCompleted,
    VerificationCompleted,
)
from exam_app.core.models import (
    Notice,
    NoticeLevel,
    Phase,
    Question,
    QuestionId,
    ReportInput,
    Score,
    SessionState,
    SubmissionMeta,
    SubmissionStatus,
)
from exam_app.core.report_builder import ReportBuilder, ReportDocument
from exam_app.core.scoring import compute_score, format_clock
from exam_app.core.services.countdown_clock import CountdownClock
from exam_app.core.services.exam_api import ExamApiClient
from exam_app.core.services.focus_monitor import FocusMonitor
from exam_app.core.services.submission_client import SubmissionClient
from exam_app.core.services.task_runner import TaskRunner

logger = logging.getLogger(__name__)

STAGE_VERIFY = "verify"
STAGE_QUESTIONS = "questions"
STAGE_SUBMIT = "submit"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExamSession:
    """Owns the session state, the answer set and the question cursor.

    Every mutation happens inside one of the public actions or inside
    `handle_event`, all of which run on the event loop. Collaborators only
    read snapshots or feed events back in.
    """

    def __init__(
        self,
        api: ExamApiClient,
        submitter: SubmissionClient,
        report_builder: ReportBuilder,
        clock: CountdownClock,
        focus_monitor: FocusMonitor,
        runner: TaskRunner,
        confirm: Callable[[str], bool],
        *,
        duration_seconds: int = EXAM_DURATION_SECONDS,
        question_limit: int = QUESTION_LIMIT,
        submit_delay_ms: int = REPORT_SUBMIT_DELAY_MS,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._api = api
        self._submitter = submitter
        self._report_builder = report_builder
        self._clock = clock
        self._focus_monitor = focus_monitor
        self._runner = runner
        self._confirm = confirm
        self._question_limit = question_limit
        self._submit_delay_ms = submit_delay_ms
        self._now = now

        self._state = SessionState(
            duration_budget_seconds=duration_seconds,
            time_remaining_seconds=duration_seconds,
        )
        self._verify_in_flight: bool = False
        self._questions_in_flight: bool = False
        self._verify_message: str | None = None
        self._last_document: ReportDocument | None = None

        self._change_listeners: list[Callable[[], None]] = []
        self._notice_listeners: list[Callable[[Notice], None]] = []

    # --- Listeners ---

    def add_change_listener(self, listener: Callable[[], None]) -> None:
        self._change_listeners.append(listener)

    def add_notice_listener(self, listener: Callable[[Notice], None]) -> None:
        self._notice_listeners.append(listener)

    # --- Read-only view ---

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def participant_name(self) -> str:
        return self._state.participant_name

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._state.questions

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def current_question(self) -> Question | None:
        if not self._state.questions:
            return None
        return self._state.questions[self._state.cursor]

    @property
    def answers(self) -> dict[QuestionId, str]:
        return dict(self._state.answers)

    @property
    def started_at(self) -> datetime | None:
        return self._state.started_at

    @property
    def finished_at(self) -> datetime | None:
        return self._state.finished_at

    @property
    def time_remaining_seconds(self) -> int:
        return self._state.time_remaining_seconds

    @property
    def violation_count(self) -> int:
        return self._state.violation_count

    @property
    def submission_status(self) -> SubmissionStatus:
        return self._state.submission_status

    @property
    def verify_message(self) -> str | None:
        return self._verify_message

    @property
    def is_busy(self) -> bool:
        return self._verify_in_flight or self._questions_in_flight

    @property
    def last_document(self) -> ReportDocument | None:
        return self._last_document

    def answer_for(self, question_id: QuestionId) -> str | None:
        return self._state.answers.get(question_id)

    def is_answered(self, question_id: QuestionId) -> bool:
        return question_id in self._state.answers

    def compute_score(self) -> Score:
        return compute_score(self._state.questions, self._state.answers)

    def position_label(self) -> str:
        total = len(self._state.questions)
        position = self._state.cursor + 1 if total else 0
        return f"{position} / {total}"

    def remaining_label(self) -> str:
        return format_clock(self._state.time_remaining_seconds)

    # --- Verify ---

    def verify(self, name: str, code: str) -> None:
        """Send the credentials to the access gate; Rules follows on success."""
        if self._state.phase is not Phase.VERIFY or self._verify_in_flight:
            return
        self._verify_message = None
        try:
            trimmed_name = self._require_name(name)
        except ValidationError as exc:
            self._fail_verify(exc)
            return

        trimmed_code = code.strip()
        self._state.participant_name = trimmed_name
        self._state.access_code = trimmed_code
        self._verify_in_flight = True
        self._changed()
        self._runner.run(
            lambda: self._api.verify(trimmed_name, trimmed_code),
            on_success=lambda access: self.handle_event(VerificationCompleted(access=bool(access))),
            on_error=lambda exc: self.handle_event(BackgroundFailed(stage=STAGE_VERIFY, error=exc)),
        )

    @staticmethod
    def _require_name(name: str) -> str:
        trimmed = name.strip()
        if not trimmed:
            raise ValidationError("Participant name is empty.")
        return trimmed

    def _fail_verify(self, error: ExamClientError) -> None:
        self._verify_message = error.user_message
        self._notify(NoticeLevel.ERROR, error.user_message, error)
        self._changed()

    # --- Rules ---

    def confirm_rules(self) -> None:
        """Fetch the questions; Running starts only once they have arrived."""
        if self._state.phase is not Phase.RULES or self._questions_in_flight:
            return
        self._questions_in_flight = True
        self._changed()
        limit = self._question_limit
        self._runner.run(
            lambda: self._api.fetch_questions(limit),
            on_success=lambda questions: self.handle_event(QuestionsLoaded(questions=tuple(questions))),
            on_error=lambda exc: self.handle_event(BackgroundFailed(stage=STAGE_QUESTIONS, error=exc)),
        )

    def _enter_running(self, questions: tuple[Question, ...]) -> None:
        state = self._state
        state.questions = questions
        state.answers = {}
        state.cursor = 0
        state.violation_count = 0
        state.time_remaining_seconds = state.duration_budget_seconds
        state.started_at = self._now()
        state.phase = Phase.RUNNING
        self._clock.start(state.duration_budget_seconds, self.handle_event)
        self._focus_monitor.arm(self.handle_event)
        logger.info(
            "Exam started for %s with %d questions and %d seconds",
            state.participant_name,
            len(questions),
            state.duration_budget_seconds,
        )
        self._changed()

    # --- Running ---

    def select_answer(self, question_id: QuestionId, option: str) -> bool:
        """Store the chosen option for a known question; the last choice wins."""
        if self._state.phase is not Phase.RUNNING:
            return False
        if not any(question.id == question_id for question in self._state.questions):
            logger.warning("Ignoring answer for unknown question %r", question_id)
            return False
        if self._state.answers.get(question_id) == option:
            return True
        self._state.answers[question_id] = option
        self._changed()
        return True

    def navigate(self, delta: int) -> int:
        return self.go_to(self._state.cursor + delta)

    def go_to(self, index: int) -> int:
        """Move the cursor, clamped to the question range; returns the new cursor."""
        if self._state.phase is not Phase.RUNNING:
            return self._state.cursor
        last_index = max(0, len(self._state.questions) - 1)
        clamped = min(max(index, 0), last_index)
        if clamped != self._state.cursor:
            self._state.cursor = clamped
            self._changed()
        return clamped

    def finish_manually(self) -> bool:
        """Finish after a yes/no confirmation. Returns True if this call finished the exam."""
        if self._state.phase is not Phase.RUNNING:
            return False
        if not self._confirm(FINISH_CONFIRM_MESSAGE):
            return False
        # The clock may have expired while the confirmation was open.
        return self._enter_finished("manual")

    def finish_by_timeout(self) -> bool:
        return self._enter_finished("timeout")

    def allow_exit(self, confirm: Callable[[str], bool]) -> bool:
        return self._focus_monitor.request_exit(confirm)

    # --- Finished ---

    def _enter_finished(self, reason: str) -> bool:
        state = self._state
        if state.phase is not Phase.RUNNING:
            logger.debug("Ignoring %s finish in phase %s", reason, state.phase.name)
            return False
        state.phase = Phase.FINISHED

        self._clock.stop()
        self._focus_monitor.disarm()
        state.finished_at = self._now()
        state.submission_status = SubmissionStatus.PENDING
        logger.info(
            "Exam finished (%s) for %s: %s, %d violations",
            reason,
            state.participant_name,
            self.compute_score(),
            state.violation_count,
        )

        snapshot = ReportInput(
            participant_name=state.participant_name,
            started_at=state.started_at or state.finished_at,
            finished_at=state.finished_at,
            questions=state.questions,
            answers=dict(state.answers),
        )
        self._changed()
        self._runner.run(
            lambda: self._build_and_submit(snapshot),
            on_success=self._on_report_submitted,
            on_error=lambda exc: self.handle_event(BackgroundFailed(stage=STAGE_SUBMIT, error=exc)),
            delay_ms=self._submit_delay_ms,
        )
        return True

    def _build_and_submit(self, snapshot: ReportInput) -> ReportDocument:
        """Runs off the event loop; touches only the immutable snapshot."""
        document = self._report_builder.build(snapshot)
        meta = SubmissionMeta(
            participant_name=snapshot.participant_name,
            started_at=document.started_at,
            finished_at=document.finished_at,
            duration=document.duration,
            total=document.score.total,
            correct=document.score.correct,
        )
        self._submitter.submit(document.content, document.filename, meta)
        return document

    def _on_report_submitted(self, document: ReportDocument) -> None:
        self._last_document = document
        self.handle_event(SubmissionCompleted(filename=document.filename))

    # --- Events ---

    def handle_event(self, event: SessionEvent) -> None:
        """Single entry point for clock, focus and background-call events."""
        if isinstance(event, ClockTicked):
            self._on_clock_ticked(event)
        elif isinstance(event, ClockExpired):
            if self._state.phase is Phase.RUNNING:
                self.finish_by_timeout()
        elif isinstance(event, FocusLost):
            self._on_focus_lost()
        elif isinstance(event, VerificationCompleted):
            self._on_verification_completed(event)
        elif isinstance(event, QuestionsLoaded):
            self._on_questions_loaded(event)
        elif isinstance(event, SubmissionCompleted):
            self._on_submission_completed(event)
        elif isinstance(event, BackgroundFailed):
            self._on_background_failed(event)
        else:
            raise TypeError(f"Unsupported session event: {event!r}")

    def _on_clock_ticked(self, event: ClockTicked) -> None:
        if self._state.phase is not Phase.RUNNING:
            return
        remaining = min(self._state.time_remaining_seconds, max(0, event.remaining_seconds))
        if remaining != self._state.time_remaining_seconds:
            self._state.time_remaining_seconds = remaining
            self._changed()

    def _on_focus_lost(self) -> None:
        if self._state.phase is not Phase.RUNNING:
            return
        self._state.violation_count += 1
        logger.warning(
            "Focus lost by %s (violation %d)",
            self._state.participant_name,
            self._state.violation_count,
        )
        self._notify(NoticeLevel.WARNING, VIOLATION_WARNING_MESSAGE)
        self._changed()

    def _on_verification_completed(self, event: VerificationCompleted) -> None:
        self._verify_in_flight = False
        if self._state.phase is not Phase.VERIFY:
            return
        if not event.access:
            logger.info("Access denied for %s", self._state.participant_name)
            self._fail_verify(VerificationDeniedError("Access flag was false."))
            return
        self._state.phase = Phase.RULES
        logger.info("Access granted for %s", self._state.participant_name)
        self._changed()

    def _on_questions_loaded(self, event: QuestionsLoaded) -> None:
        self._questions_in_flight = False
        if self._state.phase is not Phase.RULES:
            return
        self._enter_running(event.questions)

    def _on_submission_completed(self, event: SubmissionCompleted) -> None:
        self._state.submission_status = SubmissionStatus.SENT
        self._notify(NoticeLevel.INFO, SUBMISSION_SUCCESS_MESSAGE)
        self._changed()

    def _on_background_failed(self, event: BackgroundFailed) -> None:
        error = event.error
        if isinstance(error, ExamClientError):
            logger.error("%s failed: %s", event.stage, error)
        else:
            logger.error("%s failed unexpectedly", event.stage, exc_info=error)

        if event.stage == STAGE_VERIFY:
            self._verify_in_flight = False
            if not isinstance(error, ExamClientError):
                error = TransientNetworkError(str(error))
            self._fail_verify(error)
            return

        if event.stage == STAGE_QUESTIONS:
            self._questions_in_flight = False
            self._notify(NoticeLevel.ERROR, QUESTIONS_LOAD_FAILED_MESSAGE, error)
            self._changed()
            return

        self._state.submission_status = SubmissionStatus.FAILED
        message = error.user_message if isinstance(error, ExamClientError) else REPORT_FAILED_MESSAGE
        self._notify(NoticeLevel.ERROR, message, error)
        self._changed()

    # --- Internals ---

    def _changed(self) -> None:
        for listener in list(self._change_listeners):
            listener()

    def _notify(self, level: NoticeLevel, message: str, error: Exception | None = None) -> None:
        for listener in list(self._notice_listeners):
            listener(Notice(level=level, message=message, error=error))
