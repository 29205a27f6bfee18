"""Component for answering questions while the countdown runs."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    FINISH_BUTTON,
    FOOTER_TEMPLATE,
    NEXT_BUTTON,
    PLATFORM_TAGLINE,
    PREV_BUTTON,
    PROMPT_FONT_SIZE,
    QUESTION_COUNT_TEMPLATE,
    QUESTION_HEADING_TEMPLATE,
    QUICK_JUMP_COLUMNS,
    REMAINING_TIME_LABEL,
    VIOLATIONS_TEMPLATE,
)
from exam_app.core.exam_session import ExamSession
from exam_app.core.models import Question
from exam_app.ui.question_renderer import render_prompt_html
from exam_app.styling.styles import Styles


class RunningPanel(QWidget):
    """Question view, option buttons, navigation and the quick-jump grid."""

    def __init__(self, session: ExamSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self.option_buttons: list[QPushButton] = []
        self._option_values: list[str] = []
        self.jump_buttons: list[QPushButton] = []
        self._rendered_question: Question | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Header: platform title, participant and remaining time
        header_row = QHBoxLayout()
        self.title_label = QLabel(PLATFORM_TAGLINE, self)
        self.title_label.setWordWrap(True)
        header_row.addWidget(self.title_label, stretch=1)

        self.name_label = QLabel("", self)
        self.name_label.setTextFormat(Qt.PlainText)
        self.name_label.setStyleSheet(Styles.get_muted_label_style())
        header_row.addWidget(self.name_label)

        self.timer_caption = QLabel(REMAINING_TIME_LABEL, self)
        header_row.addWidget(self.timer_caption)
        self.timer_label = QLabel("", self)
        self.timer_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        body_row = QHBoxLayout()
        layout.addLayout(body_row, stretch=1)

        # Question card
        question_card = QWidget(self)
        question_card.setStyleSheet(Styles.get_card_style())
        question_layout = QVBoxLayout()
        question_card.setLayout(question_layout)
        body_row.addWidget(question_card, stretch=3)

        self.heading_label = QLabel("", question_card)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        question_layout.addWidget(self.heading_label)

        self.prompt_label = QLabel("", question_card)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        question_layout.addWidget(self.prompt_label)

        self.options_layout = QVBoxLayout()
        question_layout.addLayout(self.options_layout)
        question_layout.addStretch()

        nav_row = QHBoxLayout()
        self.violations_label = QLabel("", question_card)
        self.violations_label.setTextFormat(Qt.RichText)
        nav_row.addWidget(self.violations_label)
        nav_row.addStretch()

        self.prev_button = QPushButton(PREV_BUTTON, question_card)
        self.prev_button.setStyleSheet(Styles.get_secondary_button_style())
        self.prev_button.clicked.connect(lambda: self.session.navigate(-1))
        nav_row.addWidget(self.prev_button)

        self.next_button = QPushButton(NEXT_BUTTON, question_card)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(lambda: self.session.navigate(1))
        nav_row.addWidget(self.next_button)
        question_layout.addLayout(nav_row)

        # Quick-jump sidebar
        sidebar = QWidget(self)
        sidebar.setStyleSheet(Styles.get_card_style())
        sidebar_layout = QVBoxLayout()
        sidebar.setLayout(sidebar_layout)
        body_row.addWidget(sidebar, stretch=1)

        self.question_count_label = QLabel("", sidebar)
        sidebar_layout.addWidget(self.question_count_label)

        self.jump_grid = QGridLayout()
        sidebar_layout.addLayout(self.jump_grid)
        sidebar_layout.addStretch()

        # Footer
        footer_row = QHBoxLayout()
        self.footer_label = QLabel("", self)
        self.footer_label.setTextFormat(Qt.PlainText)
        self.footer_label.setStyleSheet(Styles.get_muted_label_style())
        footer_row.addWidget(self.footer_label)
        footer_row.addStretch()

        self.finish_button = QPushButton(FINISH_BUTTON, self)
        self.finish_button.setStyleSheet(Styles.get_danger_button_style())
        self.finish_button.clicked.connect(self.session.finish_manually)
        footer_row.addWidget(self.finish_button)
        layout.addLayout(footer_row)

    def refresh(self) -> None:
        session = self.session
        questions = session.questions
        total = len(questions)

        self.name_label.setText(session.participant_name)
        self.timer_label.setText(session.remaining_label())
        self.heading_label.setText(
            QUESTION_HEADING_TEMPLATE.format(position=session.position_label())
        )
        self.violations_label.setText(VIOLATIONS_TEMPLATE.format(count=session.violation_count))
        self.question_count_label.setText(QUESTION_COUNT_TEMPLATE.format(count=total))
        self.footer_label.setText(
            FOOTER_TEMPLATE.format(name=session.participant_name, count=total)
        )

        question = session.current_question
        if question is not self._rendered_question:
            self._render_question(question)
        self._update_option_styles(question)

        self.prev_button.setEnabled(session.cursor > 0)
        self.next_button.setEnabled(session.cursor < total - 1)
        self._refresh_jump_grid()

    def _render_question(self, question: Question | None) -> None:
        self._rendered_question = question
        self.prompt_label.setText(render_prompt_html(question, PROMPT_FONT_SIZE))

        for button in self.option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self.option_buttons = []
        self._option_values = []

        if question is None:
            return
        for option in question.options:
            # A single "&" would be eaten as a mnemonic marker.
            button = QPushButton(option.replace("&", "&&"), self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, value=option: self._handle_option_clicked(value))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)
            self._option_values.append(option)

    def _handle_option_clicked(self, option: str) -> None:
        question = self.session.current_question
        if question is not None:
            self.session.select_answer(question.id, option)
        # Re-sync in case the choice was unchanged and no refresh followed.
        self._update_option_styles(question)

    def _update_option_styles(self, question: Question | None) -> None:
        chosen = self.session.answer_for(question.id) if question is not None else None
        for button, option in zip(self.option_buttons, self._option_values):
            selected = option == chosen
            button.setChecked(selected)
            button.setStyleSheet(Styles.get_option_button_style(selected))

    def _refresh_jump_grid(self) -> None:
        questions = self.session.questions
        if len(self.jump_buttons) != len(questions):
            self._rebuild_jump_grid(len(questions))

        for index, (button, question) in enumerate(zip(self.jump_buttons, questions)):
            button.setStyleSheet(
                Styles.get_jump_button_style(
                    answered=self.session.is_answered(question.id),
                    current=index == self.session.cursor,
                )
            )

    def _rebuild_jump_grid(self, count: int) -> None:
        for button in self.jump_buttons:
            self.jump_grid.removeWidget(button)
            button.deleteLater()
        self.jump_buttons = []

        for index in range(count):
            button = QPushButton(str(index + 1), self)
            button.clicked.connect(lambda _checked=False, target=index: self.session.go_to(target))
            row, column = divmod(index, QUICK_JUMP_COLUMNS)
            self.jump_grid.addWidget(button, row, column)
            self.jump_buttons.append(button)
