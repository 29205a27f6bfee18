"""Styling module for the exam client."""

from .color_palette import ColorPalette
from .styles import Styles

__all__ = ["ColorPalette", "Styles"]
