"""Countdown clock driving the exam time budget."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from exam_app.constants.exam_constants import TICK_INTERVAL_MS
from exam_app.core.events import ClockExpired, ClockTicked

logger = logging.getLogger(__name__)

ClockSink = Callable[[ClockTicked | ClockExpired], None]


class TickSource(Protocol):
    """Repeating timer primitive; QTimer in the application."""

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class CountdownClock:
    """Counts a budget down one second per tick and expires exactly once."""

    def __init__(self, tick_source: TickSource, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._tick_source = tick_source
        self._interval_ms = interval_ms
        self._remaining: int = 0
        self._running: bool = False
        self._sink: ClockSink | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    def start(self, budget_seconds: int, sink: ClockSink) -> None:
        if budget_seconds < 1:
            raise ValueError("Clock budget must be at least one second.")
        self.stop()
        self._remaining = budget_seconds
        self._sink = sink
        self._running = True
        self._tick_source.start(self._interval_ms, self._on_tick)
        logger.debug("Clock armed for %s seconds", budget_seconds)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._sink = None
        self._tick_source.stop()

    def _on_tick(self) -> None:
        if not self._running or self._sink is None:
            return
        sink = self._sink
        self._remaining = max(0, self._remaining - 1)
        sink(ClockTicked(remaining_seconds=self._remaining))
        if self._remaining == 0 and self._running:
            self.stop()
            logger.info("Clock expired")
            sink(ClockExpired())
