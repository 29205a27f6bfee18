"""Shared fixtures: offscreen Qt, manual clocks and a wired ExamSession."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from exam_app.core.exam_session import ExamSession  # noqa: E402
from exam_app.core.models import Question  # noqa: E402
from exam_app.core.report_builder import ReportBuilder  # noqa: E402
from exam_app.core.services.countdown_clock import CountdownClock  # noqa: E402
from exam_app.core.services.exam_api import ExamApiClient  # noqa: E402
from exam_app.core.services.focus_monitor import FocusMonitor  # noqa: E402
from exam_app.core.services.submission_client import SubmissionClient  # noqa: E402
from exam_app.core.services.task_runner import ImmediateTaskRunner  # noqa: E402

START_TIME = datetime(2025, 5, 6, 7, 0, 0, tzinfo=timezone.utc)


class ManualTickSource:
    """Tick source that only fires when a test asks it to."""

    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.interval_ms: int | None = None
        self.start_calls = 0
        self.stop_calls = 0

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.start_calls += 1

    def stop(self) -> None:
        self.callback = None
        self.stop_calls += 1

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


class DeferredTaskRunner:
    """Queues jobs so tests decide when background work completes."""

    def __init__(self) -> None:
        self.pending: list[tuple[Callable, Callable, Callable, int]] = []

    def run(self, job, on_success, on_error, delay_ms: int = 0) -> None:
        self.pending.append((job, on_success, on_error, delay_ms))

    def complete_next(self) -> None:
        job, on_success, on_error, _ = self.pending.pop(0)
        try:
            result = job()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)


class SteppingNow:
    """Deterministic `now` that returns START_TIME plus a settable offset."""

    def __init__(self) -> None:
        self.offset = timedelta()

    def advance(self, seconds: float) -> None:
        self.offset += timedelta(seconds=seconds)

    def __call__(self) -> datetime:
        return START_TIME + self.offset


def make_question(question_id, prompt="Prompt", options=("A", "B", "C"), correct="A") -> Question:
    return Question(id=question_id, prompt=prompt, options=tuple(options), correct_option=correct)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def questions() -> tuple[Question, ...]:
    return (
        make_question(1, "Two plus two?", ("3", "4", "5"), "4"),
        make_question(2, "Capital of Uzbekistan?", ("Tashkent", "Samarkand"), "Tashkent"),
        make_question("q3", "Largest planet?", ("Mars", "Jupiter", "Venus"), "Jupiter"),
    )


@pytest.fixture
def tick_source() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def now() -> SteppingNow:
    return SteppingNow()


@pytest.fixture
def api(questions) -> Mock:
    mock = Mock(spec=ExamApiClient)
    mock.verify.return_value = True
    mock.fetch_questions.return_value = questions
    return mock


@pytest.fixture
def submitter() -> Mock:
    return Mock(spec=SubmissionClient)


@pytest.fixture
def confirm() -> Mock:
    return Mock(return_value=True)


@pytest.fixture
def focus_monitor() -> FocusMonitor:
    return FocusMonitor()


@pytest.fixture
def make_session(api, submitter, confirm, focus_monitor, tick_source, now):
    """Factory building an ExamSession around the shared fakes."""

    def factory(runner=None, duration_seconds: int = 3600) -> ExamSession:
        return ExamSession(
            api=api,
            submitter=submitter,
            report_builder=ReportBuilder(font_paths=()),
            clock=CountdownClock(tick_source),
            focus_monitor=focus_monitor,
            runner=runner or ImmediateTaskRunner(),
            confirm=confirm,
            duration_seconds=duration_seconds,
            now=now,
        )

    return factory


@pytest.fixture
def running_session(make_session):
    """Session that has passed verification and rules and is now Running."""
    session = make_session()
    session.verify("Ali Vali", "CODE-1")
    session.confirm_rules()
    return session
