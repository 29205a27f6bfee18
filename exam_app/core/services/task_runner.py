"""Background job runners used by the exam session.

A runner executes a job away from the event loop and reports the outcome
through exactly one of the two callbacks, on the event loop.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

Job = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class TaskRunner(Protocol):
    def run(
        self,
        job: Job,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        delay_ms: int = 0,
    ) -> None: ...


class ImmediateTaskRunner:
    """Runs jobs synchronously in the caller. Delays are ignored."""

    def run(
        self,
        job: Job,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        delay_ms: int = 0,
    ) -> None:
        try:
            result = job()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)
