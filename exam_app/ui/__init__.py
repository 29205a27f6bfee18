"""Qt UI components for the exam client."""

from .dialog_helpers import confirm_yes_no, show_notice
from .exam_main_window import ExamMainWindow
from .qt_runtime import QtTaskRunner, QtTickSource
from .question_renderer import render_prompt_html

__all__ = [
    "ExamMainWindow",
    "QtTaskRunner",
    "QtTickSource",
    "confirm_yes_no",
    "render_prompt_html",
    "show_notice",
]
