from __future__ import annotations

from exam_app.core.markdown_renderer import MarkdownRenderer
from exam_app.core.models import Question
from exam_app.ui.question_renderer import render_prompt_html


def test_prompt_markdown_is_rendered_with_font_size() -> None:
    question = Question(id=1, prompt="What is **2+2**?", options=("4",), correct_option="4")

    html = render_prompt_html(question, font_size=18)

    assert html.startswith('<div style="font-size: 18pt;">')
    assert "<strong>2+2</strong>" in html


def test_missing_question_renders_nothing() -> None:
    assert render_prompt_html(None) == ""


def test_raw_html_in_prompt_is_escaped() -> None:
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_empty_prompt_renders_placeholder() -> None:
    assert MarkdownRenderer().render_fragment("   ") == "<p><em>—</em></p>"
