"""Question rendering utilities for the running exam view."""

from __future__ import annotations

from exam_app.core.markdown_renderer import renderer
from exam_app.core.models import Question


def render_prompt_html(question: Question | None, font_size: int = 14) -> str:
    """Render a question prompt as a rich-text fragment for a QLabel.

    Args:
        question: The question to show, or None when the exam has no questions
        font_size: Font size in points for the prompt text (default 14)

    Returns:
        HTML string ready for a QLabel with Qt.RichText format
    """
    if question is None:
        return ""
    body = renderer.render_fragment(question.prompt)
    return f'<div style="font-size: {font_size}pt;">{body}</div>'
