"""Builds the paginated PDF results report for a finished exam.

The builder works in two steps. `build_transcript_lines` and `paginate_lines`
produce a pure layout (which physical line lands on which page) that can be
inspected without rendering. `ReportBuilder.build` then draws that layout
with reportlab into an in-memory PDF.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from exam_app.constants.exam_constants import (
    FILENAME_FALLBACK,
    FILENAME_JOINER,
    REPORT_BODY_FONT_SIZE,
    REPORT_BOTTOM_MARGIN,
    REPORT_EXTENSION,
    REPORT_FONT_NAME,
    REPORT_HEADER_GAP,
    REPORT_HEADER_LINE_HEIGHT,
    REPORT_LINE_HEIGHT,
    REPORT_MARGIN_LEFT,
    REPORT_MARGIN_RIGHT,
    REPORT_TITLE_FONT_SIZE,
    REPORT_TITLE_GAP,
    REPORT_TOP_OFFSET,
    REPORT_TTF_FONT_PATHS,
    REPORT_TTF_FONT_PREFIX,
    UNANSWERED_PLACEHOLDER,
)
from exam_app.constants.network_constants import REPORT_MIME_TYPE
from exam_app.constants.ui_constants import (
    REPORT_CHOSEN_LABEL,
    REPORT_CORRECT_LABEL,
    REPORT_DURATION_LABEL,
    REPORT_FINISHED_LABEL,
    REPORT_NAME_LABEL,
    REPORT_SCORE_LABEL,
    REPORT_STARTED_LABEL,
    REPORT_TITLE,
)
from exam_app.core.errors import ReportGenerationError
from exam_app.core.models import ReportInput, Score
from exam_app.core.scoring import compute_score, format_duration, format_iso

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED_FILENAME_CHARS = re.compile(rf"[^\w{re.escape(FILENAME_JOINER)}-]")


@dataclass(frozen=True, slots=True)
class ReportPage:
    """Physical lines placed on one page, with their vertical offsets from the top."""

    number: int
    lines: tuple[tuple[float, str], ...]


@dataclass(frozen=True, slots=True)
class ReportLayout:
    header: tuple[str, ...]
    pages: tuple[ReportPage, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass(frozen=True, slots=True)
class ReportDocument:
    filename: str
    content: bytes
    score: Score
    duration: str
    started_at: str
    finished_at: str
    layout: ReportLayout
    mime_type: str = REPORT_MIME_TYPE


def sanitize_name(name: str) -> str:
    """Collapse whitespace to the joiner and drop anything but letters, digits, joiner and '-'."""
    joined = _WHITESPACE_RUN.sub(FILENAME_JOINER, name.strip())
    cleaned = _DISALLOWED_FILENAME_CHARS.sub("", joined)
    return cleaned or FILENAME_FALLBACK


def build_filename(name: str, finished_at: datetime, extension: str = REPORT_EXTENSION) -> str:
    """Return '<sanitizedName>_<YYYYMMDD>-<HHMM>.<ext>' using the finish timestamp as given."""
    return f"{sanitize_name(name)}{FILENAME_JOINER}{finished_at:%Y%m%d-%H%M}.{extension}"


def build_header_lines(report: ReportInput, score: Score) -> list[str]:
    return [
        f"{REPORT_NAME_LABEL}: {report.participant_name}",
        f"{REPORT_STARTED_LABEL}: {format_iso(report.started_at)}",
        f"{REPORT_FINISHED_LABEL}: {format_iso(report.finished_at)}",
        f"{REPORT_DURATION_LABEL}: {format_duration(report.started_at, report.finished_at)}",
        f"{REPORT_SCORE_LABEL}: {score}",
    ]


def build_transcript_lines(report: ReportInput) -> list[str]:
    """Logical transcript lines, one block per question in exam order."""
    lines: list[str] = []
    for index, question in enumerate(report.questions, start=1):
        chosen = report.answers.get(question.id) or UNANSWERED_PLACEHOLDER
        lines.append(f"{index}. {question.prompt}")
        lines.append(f"{REPORT_CHOSEN_LABEL}: {chosen}")
        lines.append(f"{REPORT_CORRECT_LABEL}: {question.correct_option}")
        lines.append("")
    return lines


def paginate_lines(
    logical_lines: list[str],
    *,
    font_name: str,
    font_size: float,
    max_width: float,
    first_offset: float,
    top_offset: float,
    page_height: float,
    bottom_margin: float,
    line_height: float,
) -> tuple[ReportPage, ...]:
    """Wrap logical lines to `max_width` and assign each physical line a page.

    A page break happens before a line whose offset would pass the usable
    height, so no physical line is ever split across pages.
    """
    usable_bottom = page_height - bottom_margin
    pages: list[ReportPage] = []
    current: list[tuple[float, str]] = []
    y = first_offset

    for logical in logical_lines:
        physical = simpleSplit(logical, font_name, font_size, max_width) if logical else [""]
        for line in physical:
            if y > usable_bottom:
                pages.append(ReportPage(number=len(pages) + 1, lines=tuple(current)))
                current = []
                y = top_offset
            current.append((y, line))
            y += line_height

    pages.append(ReportPage(number=len(pages) + 1, lines=tuple(current)))
    return tuple(pages)


class ReportBuilder:
    """Renders a ReportInput snapshot into a PDF ReportDocument."""

    def __init__(self, font_paths: Sequence[str] = REPORT_TTF_FONT_PATHS) -> None:
        self._page_width, self._page_height = A4
        self._font_name = self._register_font(font_paths)

    @property
    def font_name(self) -> str:
        return self._font_name

    def build(self, report: ReportInput) -> ReportDocument:
        score = compute_score(report.questions, report.answers)
        try:
            layout = self.layout(report, score)
            content = self._render(layout)
        except Exception as exc:
            logger.exception("Rendering the report for %s failed", report.participant_name)
            raise ReportGenerationError(str(exc)) from exc

        filename = build_filename(report.participant_name, report.finished_at)
        logger.info("Built report %s (%d pages, score %s)", filename, layout.page_count, score)
        return ReportDocument(
            filename=filename,
            content=content,
            score=score,
            duration=format_duration(report.started_at, report.finished_at),
            started_at=format_iso(report.started_at),
            finished_at=format_iso(report.finished_at),
            layout=layout,
        )

    def layout(self, report: ReportInput, score: Score) -> ReportLayout:
        header = tuple(build_header_lines(report, score))
        first_offset = (
            REPORT_TOP_OFFSET
            + REPORT_TITLE_GAP
            + REPORT_HEADER_LINE_HEIGHT * len(header)
            + REPORT_HEADER_GAP
        )
        pages = paginate_lines(
            build_transcript_lines(report),
            font_name=self._font_name,
            font_size=REPORT_BODY_FONT_SIZE,
            max_width=self._page_width - REPORT_MARGIN_LEFT - REPORT_MARGIN_RIGHT,
            first_offset=first_offset,
            top_offset=REPORT_TOP_OFFSET,
            page_height=self._page_height,
            bottom_margin=REPORT_BOTTOM_MARGIN,
            line_height=REPORT_LINE_HEIGHT,
        )
        return ReportLayout(header=header, pages=pages)

    def _render(self, layout: ReportLayout) -> bytes:
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(self._page_width, self._page_height))
        pdf.setTitle(REPORT_TITLE)

        y = REPORT_TOP_OFFSET
        pdf.setFont(self._font_name, REPORT_TITLE_FONT_SIZE)
        pdf.drawString(REPORT_MARGIN_LEFT, self._page_height - y, REPORT_TITLE)
        y += REPORT_TITLE_GAP

        pdf.setFont(self._font_name, REPORT_BODY_FONT_SIZE)
        for line in layout.header:
            pdf.drawString(REPORT_MARGIN_LEFT, self._page_height - y, line)
            y += REPORT_HEADER_LINE_HEIGHT

        for page in layout.pages:
            if page.number > 1:
                pdf.showPage()
                pdf.setFont(self._font_name, REPORT_BODY_FONT_SIZE)
            for offset, text in page.lines:
                if text:
                    pdf.drawString(REPORT_MARGIN_LEFT, self._page_height - offset, text)

        pdf.save()
        return buffer.getvalue()

    @staticmethod
    def _register_font(font_paths: Sequence[str]) -> str:
        """Register the first readable TrueType candidate and return its font name."""
        for font_path in font_paths:
            path = Path(font_path)
            if not path.is_absolute():
                # exam_app/core/report_builder.py -> project root
                path = Path(__file__).resolve().parents[2] / path
            if not path.is_file():
                continue
            font_name = f"{REPORT_TTF_FONT_PREFIX}-{path.stem}"
            if font_name in pdfmetrics.getRegisteredFontNames():
                return font_name
            try:
                pdfmetrics.registerFont(TTFont(font_name, str(path)))
            except TTFError as exc:
                logger.warning("Skipping unreadable report font %s: %s", path, exc)
                continue
            logger.info("Report font: %s", path)
            return font_name

        if font_paths:
            logger.warning(
                "No TrueType report font found; names outside Latin-1 will not render in the PDF"
            )
        return REPORT_FONT_NAME
