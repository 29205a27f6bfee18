"""Observes window visibility and exit attempts while an exam is running."""

from __future__ import annotations

import logging
from collections.abc import Callable

from exam_app.constants.ui_constants import EXIT_GUARD_MESSAGE
from exam_app.core.events import FocusLost

logger = logging.getLogger(__name__)


class FocusMonitor:
    """Turns visibility transitions into FocusLost events and guards exit.

    The monitor only reports; counting violations and warning the participant
    is the session's job.
    """

    def __init__(self, exit_message: str = EXIT_GUARD_MESSAGE) -> None:
        self._exit_message = exit_message
        self._sink: Callable[[FocusLost], None] | None = None
        self._visible: bool = True

    @property
    def is_armed(self) -> bool:
        return self._sink is not None

    def arm(self, sink: Callable[[FocusLost], None]) -> None:
        self._sink = sink
        self._visible = True
        logger.debug("Focus monitor armed")

    def disarm(self) -> None:
        if self._sink is None:
            return
        self._sink = None
        logger.debug("Focus monitor disarmed")

    def report_visibility(self, visible: bool) -> None:
        """Record the current visibility; a visible-to-hidden edge is a violation."""
        was_visible = self._visible
        self._visible = visible
        if self._sink is None or visible or not was_visible:
            return
        self._sink(FocusLost())

    def request_exit(self, confirm: Callable[[str], bool]) -> bool:
        """Return True when the application may close."""
        if self._sink is None:
            return True
        return confirm(self._exit_message)
