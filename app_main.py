"""Application entry point for the ExamQt client."""

from __future__ import annotations

import sys

import requests
from PySide6.QtWidgets import QApplication

from exam_app.constants.about import APP_NAME, APP_VERSION
from exam_app.constants.exam_constants import TICK_INTERVAL_MS
from exam_app.constants.network_constants import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from exam_app.constants.ui_constants import FINISH_CONFIRM_TITLE
from exam_app.core.exam_session import ExamSession
from exam_app.core.report_builder import ReportBuilder
from exam_app.core.services.countdown_clock import CountdownClock
from exam_app.core.services.exam_api import ExamApiClient
from exam_app.core.services.focus_monitor import FocusMonitor
from exam_app.core.services.submission_client import SubmissionClient
from exam_app.ui.dialog_helpers import confirm_yes_no
from exam_app.ui.exam_main_window import ExamMainWindow
from exam_app.ui.qt_runtime import QtTaskRunner, QtTickSource
from exam_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the exam session and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s against %s", APP_NAME, APP_VERSION, API_BASE_URL)

    app = QApplication(sys.argv)

    http = requests.Session()
    focus_monitor = FocusMonitor()
    session = ExamSession(
        api=ExamApiClient(API_BASE_URL, session=http, timeout=REQUEST_TIMEOUT_SECONDS),
        submitter=SubmissionClient(API_BASE_URL, session=http, timeout=REQUEST_TIMEOUT_SECONDS),
        report_builder=ReportBuilder(),
        clock=CountdownClock(QtTickSource(), interval_ms=TICK_INTERVAL_MS),
        focus_monitor=focus_monitor,
        runner=QtTaskRunner(),
        confirm=lambda message: confirm_yes_no(
            QApplication.activeWindow(), FINISH_CONFIRM_TITLE, message
        ),
    )

    window = ExamMainWindow(session=session, focus_monitor=focus_monitor)
    window.show()
    exit_code = app.exec()
    http.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
