"""Exam-related constants shared across UI and core layers."""

EXAM_DURATION_SECONDS: int = 60 * 60
QUESTION_LIMIT: int = 25
TICK_INTERVAL_MS: int = 1000
REPORT_SUBMIT_DELAY_MS: int = 400

UNANSWERED_PLACEHOLDER: str = "-"
FILENAME_JOINER: str = "_"
FILENAME_FALLBACK: str = "user"
REPORT_EXTENSION: str = "pdf"

# Report page metrics, in PDF points (A4 is 595 x 842).
REPORT_MARGIN_LEFT: float = 40.0
REPORT_MARGIN_RIGHT: float = 40.0
REPORT_TOP_OFFSET: float = 50.0
REPORT_BOTTOM_MARGIN: float = 50.0
REPORT_TITLE_FONT_SIZE: int = 14
REPORT_BODY_FONT_SIZE: int = 11
REPORT_TITLE_GAP: float = 22.0
REPORT_HEADER_LINE_HEIGHT: float = 16.0
REPORT_HEADER_GAP: float = 8.0
REPORT_LINE_HEIGHT: float = 14.0
REPORT_FONT_NAME: str = "Helvetica"

# TrueType fonts tried in order for glyphs outside WinAnsi (Cyrillic, U+02BB).
# The first readable one wins; Helvetica is used when none is found.
REPORT_TTF_FONT_PATHS: tuple[str, ...] = (
    "exam_app/data/fonts/NotoSans-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
)
REPORT_TTF_FONT_PREFIX: str = "Report"
