"""Centralized Qt stylesheets for the application."""

from __future__ import annotations

from enum import Enum, auto

from .color_palette import ColorPalette


class ChoiceStyle(Enum):
    """Visual state of one option button."""
    PLAIN = auto()
    SELECTED = auto()
    CORRECT = auto()
    INCORRECT = auto()


class Styles:
    """Helper class to generate Qt stylesheets for the application."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT};
                border: none;
                border-radius: 4px;
                padding: 8px 14px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
                color: {ColorPalette.TEXT_SECONDARY};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 6px;
            }}
        """

    @staticmethod
    def get_choice_style(style: ChoiceStyle) -> str:
        background = ColorPalette.BACKGROUND_SECONDARY
        border = ColorPalette.BORDER_PRIMARY
        if style == ChoiceStyle.SELECTED:
            background = ColorPalette.SELECTED_BG
            border = ColorPalette.SELECTED_BORDER
        elif style == ChoiceStyle.CORRECT:
            background = ColorPalette.CORRECT_BG
            border = ColorPalette.CORRECT_BORDER
        elif style == ChoiceStyle.INCORRECT:
            background = ColorPalette.INCORRECT_BG
            border = ColorPalette.INCORRECT_BORDER
        return (
            f"QPushButton {{ background-color: {background}; color: {ColorPalette.TEXT_PRIMARY};"
            f" border: 2px solid {border}; border-radius: 6px; padding: 10px; text-align: left; }}"
        )

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style() -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY};"


def choice_style_for(
    index: int,
    selected_index: int | None,
    correct_indexes: tuple[int, ...],
    answered: bool,
) -> ChoiceStyle:
    """Decide how an option button is drawn for the current question state."""
    if answered:
        if index in correct_indexes:
            return ChoiceStyle.CORRECT
        if index == selected_index:
            return ChoiceStyle.INCORRECT
        return ChoiceStyle.PLAIN
    if index == selected_index:
        return ChoiceStyle.SELECTED
    return ChoiceStyle.PLAIN
