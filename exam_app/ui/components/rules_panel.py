"""Component showing the exam rules before the countdown starts."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import RULES_ITEMS, RULES_START_BUTTON, RULES_TITLE
from exam_app.core.exam_session import ExamSession
from exam_app.styling.styles import Styles


class RulesPanel(QWidget):
    """Lists the rules and starts the exam."""

    def __init__(self, session: ExamSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        outer.setAlignment(Qt.AlignCenter)
        self.setLayout(outer)

        card = QWidget(self)
        card.setMaximumWidth(640)
        card.setStyleSheet(Styles.get_card_style())
        layout = QVBoxLayout()
        card.setLayout(layout)
        outer.addWidget(card)

        self.title_label = QLabel(RULES_TITLE, card)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        items = "".join(f"<li>{item}</li>" for item in RULES_ITEMS)
        self.rules_label = QLabel(f"<ul>{items}</ul>", card)
        self.rules_label.setTextFormat(Qt.RichText)
        self.rules_label.setWordWrap(True)
        layout.addWidget(self.rules_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.start_button = QPushButton(RULES_START_BUTTON, card)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self.session.confirm_rules)
        button_row.addWidget(self.start_button)
        layout.addLayout(button_row)

    def refresh(self) -> None:
        self.start_button.setEnabled(not self.session.is_busy)
