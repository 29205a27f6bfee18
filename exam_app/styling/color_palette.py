"""Color palette for the exam client (light mode only)."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = "#1F2937"      # Gray 800
    TEXT_SECONDARY = "#4B5563"    # Gray 600
    TEXT_MUTED = "#6B7280"        # Gray 500

    # Background colors
    BACKGROUND_PRIMARY = "#FFFFFF"
    BACKGROUND_SECONDARY = "#F9FAFB"
    BACKGROUND_PAGE = "#F3F4F6"

    # Accent colors
    ACCENT_PRIMARY = "#4F46E5"    # Indigo
    ACCENT_SOFT = "#EEF2FF"       # Indigo 50

    # Status colors
    SUCCESS_SOFT = "#DCFCE7"      # Green 100
    NEUTRAL_SOFT = "#F3F4F6"      # Gray 100
    ERROR = "#EF4444"             # Red 500
    DANGER_BUTTON = "#DC2626"     # Red 600

    # Border colors
    BORDER_PRIMARY = "#9CA3AF"
    BORDER_LIGHT = "#E5E7EB"

    # Button colors
    BUTTON_PRIMARY_TEXT = "#FFFFFF"
    BUTTON_SECONDARY_BG = "#E5E7EB"
