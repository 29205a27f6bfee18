"""Domain models for the exam client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto


class Phase(Enum):
    """High-level phase of an exam run. Transitions only move forward."""

    VERIFY = auto()
    RULES = auto()
    RUNNING = auto()
    FINISHED = auto()


class SubmissionStatus(Enum):
    IDLE = auto()
    PENDING = auto()
    SENT = auto()
    FAILED = auto()


class NoticeLevel(Enum):
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


QuestionId = int | str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question as fetched from the question bank."""

    id: QuestionId
    prompt: str
    options: tuple[str, ...]
    correct_option: str


@dataclass(frozen=True, slots=True)
class Score:
    correct: int
    total: int

    def __str__(self) -> str:
        return f"{self.correct} / {self.total}"


@dataclass(frozen=True, slots=True)
class Notice:
    """User-visible, non-fatal notification raised by the session."""

    level: NoticeLevel
    message: str
    error: Exception | None = None


@dataclass(slots=True)
class SessionState:
    """Mutable state of the single exam run, owned by ExamSession."""

    phase: Phase = Phase.VERIFY
    participant_name: str = ""
    access_code: str = ""
    started_at: datetime | None = None
    finished_at: datetime | None = None
    duration_budget_seconds: int = 0
    time_remaining_seconds: int = 0
    violation_count: int = 0
    cursor: int = 0
    questions: tuple[Question, ...] = ()
    answers: dict[QuestionId, str] = field(default_factory=dict)
    submission_status: SubmissionStatus = SubmissionStatus.IDLE


@dataclass(frozen=True, slots=True)
class ReportInput:
    """Finish-time snapshot handed to the report builder."""

    participant_name: str
    started_at: datetime
    finished_at: datetime
    questions: tuple[Question, ...]
    answers: dict[QuestionId, str]


@dataclass(frozen=True, slots=True)
class SubmissionMeta:
    """Scalar fields sent next to the report document."""

    participant_name: str
    started_at: str
    finished_at: str
    duration: str
    total: int
    correct: int
