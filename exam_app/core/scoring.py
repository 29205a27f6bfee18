"""Scoring and formatting helpers shared by the session, report and UI."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

from exam_app.core.models import Question, QuestionId, Score


def compute_score(questions: Sequence[Question], answers: Mapping[QuestionId, str]) -> Score:
    """Count questions whose chosen option equals the correct one.

    Unanswered questions count as incorrect. An empty question list scores 0 / 0.
    """
    correct = sum(1 for question in questions if answers.get(question.id) == question.correct_option)
    return Score(correct=correct, total=len(questions))


def format_iso(moment: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_duration(started_at: datetime, finished_at: datetime) -> str:
    """Return the elapsed time as '<minutes>m <seconds>s'."""
    elapsed = max(0, int((finished_at - started_at).total_seconds()))
    minutes, seconds = divmod(elapsed, 60)
    return f"{minutes}m {seconds}s"


def format_clock(total_seconds: int) -> str:
    """Format a number of seconds as HH:MM:SS."""
    total_seconds = max(0, int(total_seconds))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
