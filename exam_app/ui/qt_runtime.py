"""Qt-backed tick source and background task runner.

Both deliver their callbacks on the GUI thread, which keeps ExamSession
single-threaded even though HTTP calls and PDF rendering run on a pool.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QRunnable, Qt, QThreadPool, QTimer, Signal, Slot

from exam_app.core.services.task_runner import ErrorCallback, Job, SuccessCallback


class QtTickSource:
    """Repeating QTimer used by CountdownClock."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.timeout.connect(self._on_timeout)
        self._callback: Callable[[], None] | None = None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.setInterval(interval_ms)
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()


class _TaskRelay(QObject):
    """Carries a job outcome from a pool thread back to the GUI thread."""

    succeeded = Signal(object)
    failed = Signal(object)

    def __init__(
        self,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        on_done: Callable[["_TaskRelay"], None],
    ) -> None:
        super().__init__()
        self._on_success = on_success
        self._on_error = on_error
        self._on_done = on_done
        self.succeeded.connect(self._deliver_success, Qt.ConnectionType.QueuedConnection)
        self.failed.connect(self._deliver_error, Qt.ConnectionType.QueuedConnection)

    @Slot(object)
    def _deliver_success(self, result: object) -> None:
        try:
            self._on_success(result)
        finally:
            self._on_done(self)

    @Slot(object)
    def _deliver_error(self, error: object) -> None:
        try:
            self._on_error(error)
        finally:
            self._on_done(self)


class _JobRunnable(QRunnable):
    def __init__(self, job: Job, relay: _TaskRelay) -> None:
        super().__init__()
        self._job = job
        self._relay = relay

    def run(self) -> None:
        try:
            result = self._job()
        except Exception as exc:
            self._relay.failed.emit(exc)
            return
        self._relay.succeeded.emit(result)


class QtTaskRunner:
    """Runs jobs on a QThreadPool and reports back on the GUI thread."""

    def __init__(self, pool: QThreadPool | None = None) -> None:
        self._pool = pool or QThreadPool.globalInstance()
        self._relays: set[_TaskRelay] = set()

    def run(
        self,
        job: Job,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
        delay_ms: int = 0,
    ) -> None:
        if delay_ms > 0:
            QTimer.singleShot(delay_ms, lambda: self._start(job, on_success, on_error))
            return
        self._start(job, on_success, on_error)

    def _start(self, job: Job, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        relay = _TaskRelay(on_success, on_error, self._relays.discard)
        self._relays.add(relay)
        self._pool.start(_JobRunnable(job, relay))
