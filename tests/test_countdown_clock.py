from __future__ import annotations

import pytest

from exam_app.core.events import ClockExpired, ClockTicked
from exam_app.core.services.countdown_clock import CountdownClock


def test_runs_to_zero_and_expires_exactly_once(tick_source) -> None:
    clock = CountdownClock(tick_source, interval_ms=1000)
    events = []

    clock.start(3, events.append)
    tick_source.fire(10)

    ticks = [event for event in events if isinstance(event, ClockTicked)]
    expiries = [event for event in events if isinstance(event, ClockExpired)]
    assert [tick.remaining_seconds for tick in ticks] == [2, 1, 0]
    assert len(expiries) == 1
    assert isinstance(events[-1], ClockExpired)
    assert clock.remaining_seconds == 0
    assert not clock.is_running
    assert not tick_source.active
    assert tick_source.interval_ms == 1000


def test_remaining_never_goes_negative(tick_source) -> None:
    clock = CountdownClock(tick_source)
    remaining = []

    clock.start(2, lambda event: remaining.append(getattr(event, "remaining_seconds", None)))
    tick_source.fire(5)

    assert all(value is None or value >= 0 for value in remaining)


def test_stop_is_idempotent_and_silences_ticks(tick_source) -> None:
    clock = CountdownClock(tick_source)
    events = []

    clock.stop()
    clock.start(10, events.append)
    tick_source.fire(2)
    clock.stop()
    clock.stop()
    tick_source.fire(5)

    assert len(events) == 2
    assert clock.remaining_seconds == 8
    assert not clock.is_running


def test_rejects_budget_below_one(tick_source) -> None:
    clock = CountdownClock(tick_source)

    with pytest.raises(ValueError):
        clock.start(0, lambda event: None)
    assert tick_source.start_calls == 0
