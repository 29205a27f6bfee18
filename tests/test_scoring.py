from __future__ import annotations

from datetime import datetime, timedelta, timezone
import itertools

from exam_app.core.models import Question, Score
from exam_app.core.scoring import compute_score, format_clock, format_duration, format_iso

QUESTIONS = (
    Question(id=1, prompt="a", options=("x", "y"), correct_option="x"),
    Question(id=2, prompt="b", options=("x", "y"), correct_option="y"),
    Question(id=3, prompt="c", options=("x", "y"), correct_option="x"),
)


def test_compute_score_counts_exact_matches_only() -> None:
    answers = {1: "x", 2: "x"}

    score = compute_score(QUESTIONS, answers)

    assert score == Score(correct=1, total=3)
    assert str(score) == "1 / 3"


def test_compute_score_ignores_answer_insertion_order() -> None:
    entries = [(1, "x"), (2, "y"), (3, "y")]
    results = {compute_score(QUESTIONS, dict(order)) for order in itertools.permutations(entries)}

    assert results == {Score(correct=2, total=3)}


def test_compute_score_without_questions_is_zero_of_zero() -> None:
    assert str(compute_score((), {})) == "0 / 0"


def test_unknown_answer_ids_do_not_count() -> None:
    assert compute_score(QUESTIONS, {99: "x"}).correct == 0


def test_format_iso_uses_milliseconds_and_z_suffix() -> None:
    moment = datetime(2025, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)

    assert format_iso(moment) == "2025-05-06T07:08:09.123Z"


def test_format_iso_converts_other_offsets_to_utc() -> None:
    tashkent = timezone(timedelta(hours=5))
    moment = datetime(2025, 5, 6, 12, 0, 0, tzinfo=tashkent)

    assert format_iso(moment) == "2025-05-06T07:00:00.000Z"


def test_format_duration_minutes_and_seconds() -> None:
    start = datetime(2025, 5, 6, 7, 0, 0, tzinfo=timezone.utc)

    assert format_duration(start, start + timedelta(seconds=125)) == "2m 5s"
    assert format_duration(start, start + timedelta(hours=1)) == "60m 0s"
    assert format_duration(start, start) == "0m 0s"


def test_format_clock() -> None:
    assert format_clock(3600) == "01:00:00"
    assert format_clock(3599) == "00:59:59"
    assert format_clock(61) == "00:01:01"
    assert format_clock(-5) == "00:00:00"
