"""Inbound events delivered to ExamSession.handle_event.

Clock ticks, focus changes and the outcomes of background calls all arrive
through the same entry point on the GUI thread, one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

from exam_app.core.models import Question


@dataclass(frozen=True, slots=True)
class ClockTicked:
    remaining_seconds: int


@dataclass(frozen=True, slots=True)
class ClockExpired:
    pass


@dataclass(frozen=True, slots=True)
class FocusLost:
    pass


@dataclass(frozen=True, slots=True)
class VerificationCompleted:
    access: bool


@dataclass(frozen=True, slots=True)
class QuestionsLoaded:
    questions: tuple[Question, ...]


@dataclass(frozen=True, slots=True)
class SubmissionCompleted:
    filename: str


@dataclass(frozen=True, slots=True)
class BackgroundFailed:
    """A background call raised; `stage` names the call that failed."""

    stage: str
    error: Exception


SessionEvent = (
    ClockTicked
    | ClockExpired
    | FocusLost
    | VerificationCompleted
    | QuestionsLoaded
    | SubmissionCompleted
    | BackgroundFailed
)
