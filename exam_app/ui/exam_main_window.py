"""Qt main window hosting the four exam screens."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QGuiApplication
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from exam_app.constants.about import APP_NAME, APP_VERSION
from exam_app.constants.ui_constants import EXIT_GUARD_TITLE, WINDOW_TITLE
from exam_app.core.exam_session import ExamSession
from exam_app.core.models import Notice, Phase
from exam_app.core.services.focus_monitor import FocusMonitor
from exam_app.ui.components.finished_panel import FinishedPanel
from exam_app.ui.components.rules_panel import RulesPanel
from exam_app.ui.components.running_panel import RunningPanel
from exam_app.ui.components.verify_panel import VerifyPanel
from exam_app.ui.dialog_helpers import confirm_yes_no, show_notice
from exam_app.styling.styles import Styles

logger = logging.getLogger(__name__)


class ExamMainWindow(QMainWindow):
    """Main Qt window; the visible screen always follows the session phase."""

    def __init__(self, session: ExamSession, focus_monitor: FocusMonitor) -> None:
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} ({APP_NAME} {APP_VERSION})")

        self.session = session
        self.focus_monitor = focus_monitor

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

        self.session.add_change_listener(self.refresh)
        self.session.add_notice_listener(self._show_notice)
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.connect(self._handle_application_state)
        self.refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.verify_panel = VerifyPanel(self.session, self)
        self.rules_panel = RulesPanel(self.session, self)
        self.running_panel = RunningPanel(self.session, self)
        self.finished_panel = FinishedPanel(self.session, self)

        self._panels = {
            Phase.VERIFY: self.verify_panel,
            Phase.RULES: self.rules_panel,
            Phase.RUNNING: self.running_panel,
            Phase.FINISHED: self.finished_panel,
        }
        for panel in self._panels.values():
            self.mode_stack.addWidget(panel)

        root_layout.addWidget(self.mode_stack)

    def refresh(self) -> None:
        panel = self._panels[self.session.phase]
        if self.mode_stack.currentWidget() is not panel:
            self.mode_stack.setCurrentWidget(panel)
        panel.refresh()

    def _show_notice(self, notice: Notice) -> None:
        show_notice(self, notice)

    def _handle_application_state(self, state: Qt.ApplicationState) -> None:
        self.focus_monitor.report_visibility(state == Qt.ApplicationState.ApplicationActive)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt API
        allowed = self.session.allow_exit(
            lambda message: confirm_yes_no(self, EXIT_GUARD_TITLE, message)
        )
        if not allowed:
            event.ignore()
            return
        if self.session.phase is Phase.RUNNING:
            logger.warning("Window closed while the exam was still running")
        event.accept()
