"""Helper functions for common dialog patterns in the exam UI."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QWidget

from exam_app.constants.ui_constants import (
    NOTICE_TITLE_ERROR,
    NOTICE_TITLE_INFO,
    NOTICE_TITLE_WARNING,
)
from exam_app.core.models import Notice, NoticeLevel

_NOTICE_PRESENTATION = {
    NoticeLevel.INFO: (QMessageBox.Information, NOTICE_TITLE_INFO),
    NoticeLevel.WARNING: (QMessageBox.Warning, NOTICE_TITLE_WARNING),
    NoticeLevel.ERROR: (QMessageBox.Critical, NOTICE_TITLE_ERROR),
}


def confirm_yes_no(parent: QWidget | None, title: str, message: str) -> bool:
    """Show a blocking yes/no question.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Question to ask

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_notice(parent: QWidget | None, notice: Notice) -> QMessageBox:
    """Show a notice without blocking the event loop.

    The countdown keeps ticking while the box is open; it deletes itself
    when dismissed.

    Returns:
        The message box, mainly so callers and tests can inspect it
    """
    icon, title = _NOTICE_PRESENTATION[notice.level]
    msg_box = QMessageBox(parent)
    msg_box.setIcon(icon)
    msg_box.setWindowTitle(title)
    msg_box.setText(notice.message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.setWindowModality(Qt.NonModal)
    msg_box.setAttribute(Qt.WA_DeleteOnClose)
    msg_box.show()
    return msg_box
