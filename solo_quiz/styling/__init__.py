"""Styling module for SoloQuiz."""

from .color_palette import ColorPalette
from .styles import ChoiceStyle, Styles, choice_style_for

__all__ = ["ChoiceStyle", "ColorPalette", "Styles", "choice_style_for"]
