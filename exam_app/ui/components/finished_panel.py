"""Component shown once the exam has ended."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import (
    FINISHED_DESCRIPTION,
    FINISHED_SCORE_TEMPLATE,
    FINISHED_TITLE,
    SUBMISSION_FAILED_MESSAGE,
    SUBMISSION_PENDING_MESSAGE,
    SUBMISSION_SUCCESS_MESSAGE,
)
from exam_app.core.exam_session import ExamSession
from exam_app.core.models import SubmissionStatus
from exam_app.styling.styles import Styles

_STATUS_TEXT = {
    SubmissionStatus.IDLE: "",
    SubmissionStatus.PENDING: SUBMISSION_PENDING_MESSAGE,
    SubmissionStatus.SENT: SUBMISSION_SUCCESS_MESSAGE,
    SubmissionStatus.FAILED: SUBMISSION_FAILED_MESSAGE,
}


class FinishedPanel(QWidget):
    """Shows the final score and the state of the report upload."""

    def __init__(self, session: ExamSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        outer.setAlignment(Qt.AlignCenter)
        self.setLayout(outer)

        card = QWidget(self)
        card.setMaximumWidth(520)
        card.setStyleSheet(Styles.get_card_style())
        layout = QVBoxLayout()
        card.setLayout(layout)
        outer.addWidget(card)

        self.title_label = QLabel(FINISHED_TITLE, card)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel(FINISHED_DESCRIPTION, card)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(Styles.get_muted_label_style())
        layout.addWidget(self.description_label)

        self.score_label = QLabel("", card)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.status_label = QLabel("", card)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

    def refresh(self) -> None:
        self.score_label.setText(FINISHED_SCORE_TEMPLATE.format(score=self.session.compute_score()))
        status = self.session.submission_status
        self.status_label.setText(_STATUS_TEXT[status])
        if status is SubmissionStatus.FAILED:
            self.status_label.setStyleSheet(Styles.get_error_label_style())
        else:
            self.status_label.setStyleSheet(Styles.get_muted_label_style())
