from __future__ import annotations

from unittest.mock import Mock

from exam_app.constants.ui_constants import EXIT_GUARD_MESSAGE
from exam_app.core.events import FocusLost
from exam_app.core.services.focus_monitor import FocusMonitor


def test_each_visible_to_hidden_edge_emits_one_event() -> None:
    monitor = FocusMonitor()
    events = []
    monitor.arm(events.append)

    monitor.report_visibility(False)
    monitor.report_visibility(False)
    monitor.report_visibility(True)
    monitor.report_visibility(False)

    assert events == [FocusLost(), FocusLost()]


def test_disarmed_monitor_stays_silent() -> None:
    monitor = FocusMonitor()
    events = []
    monitor.arm(events.append)
    monitor.disarm()
    monitor.disarm()

    monitor.report_visibility(False)

    assert events == []
    assert not monitor.is_armed


def test_exit_guard_asks_only_while_armed() -> None:
    monitor = FocusMonitor()
    confirm = Mock(return_value=False)

    assert monitor.request_exit(confirm) is True
    confirm.assert_not_called()

    monitor.arm(lambda event: None)
    assert monitor.request_exit(confirm) is False
    confirm.assert_called_once_with(EXIT_GUARD_MESSAGE)
