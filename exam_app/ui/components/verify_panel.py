"""Component for the access-code verification screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    PLATFORM_TAGLINE,
    VERIFY_BUTTON,
    VERIFY_CODE_PLACEHOLDER,
    VERIFY_NAME_PLACEHOLDER,
)
from exam_app.core.exam_session import ExamSession
from exam_app.styling.styles import Styles


class VerifyPanel(QWidget):
    """Collects the participant name and access code."""

    def __init__(self, session: ExamSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        outer.setAlignment(Qt.AlignCenter)
        self.setLayout(outer)

        card = QWidget(self)
        card.setMaximumWidth(420)
        card.setStyleSheet(Styles.get_card_style())
        layout = QVBoxLayout()
        card.setLayout(layout)
        outer.addWidget(card)

        self.tagline_label = QLabel(PLATFORM_TAGLINE, card)
        self.tagline_label.setAlignment(Qt.AlignCenter)
        self.tagline_label.setWordWrap(True)
        layout.addWidget(self.tagline_label)

        self.name_edit = QLineEdit(card)
        self.name_edit.setPlaceholderText(VERIFY_NAME_PLACEHOLDER)
        self.name_edit.returnPressed.connect(self._handle_submit)
        layout.addWidget(self.name_edit)

        self.code_edit = QLineEdit(card)
        self.code_edit.setPlaceholderText(VERIFY_CODE_PLACEHOLDER)
        self.code_edit.returnPressed.connect(self._handle_submit)
        layout.addWidget(self.code_edit)

        self.error_label = QLabel("", card)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        self.submit_button = QPushButton(VERIFY_BUTTON, card)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

    def _handle_submit(self) -> None:
        self.session.verify(self.name_edit.text(), self.code_edit.text())

    def refresh(self) -> None:
        message = self.session.verify_message
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))
        self.submit_button.setEnabled(not self.session.is_busy)
