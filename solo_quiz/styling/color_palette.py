"""Color palette for SoloQuiz."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = "#1E1E1E"
    TEXT_SECONDARY = "#666666"

    BACKGROUND_PRIMARY = "#FFFFFF"
    BACKGROUND_SECONDARY = "#F5F5F5"

    BORDER_PRIMARY = "#D1D1D1"

    BUTTON_PRIMARY_BG = "#0078D4"
    BUTTON_PRIMARY_TEXT = "#FFFFFF"
    BUTTON_HOVER_BG = "#E8E8E8"

    # Choice decoration
    SELECTED_BG = "#E5F1FB"
    SELECTED_BORDER = "#0078D4"
    CORRECT_BG = "#DFF6DD"
    CORRECT_BORDER = "#107C10"
    INCORRECT_BG = "#FDE7E9"
    INCORRECT_BORDER = "#D13438"
