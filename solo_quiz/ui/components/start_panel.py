"""Component for the start screen where the player enters a name."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from solo_quiz.constants.ui_constants import (
    ABOUT_BUTTON,
    NAME_PLACEHOLDER,
    START_BUTTON,
    START_DESCRIPTION,
    START_TITLE,
)
from solo_quiz.styling.styles import Styles


class StartPanel(QWidget):
    """UI component that collects the player name and starts a play-through."""

    def __init__(
        self,
        web_url: str | None,
        on_start: Callable[[str], None],
        on_about: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_about = on_about
        self._build_ui(web_url)

    def _build_ui(self, web_url: str | None) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        title_label = QLabel(START_TITLE, self)
        title_label.setAlignment(Qt.AlignCenter)
        title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title_label)

        description_label = QLabel(START_DESCRIPTION, self)
        description_label.setAlignment(Qt.AlignCenter)
        description_label.setWordWrap(True)
        layout.addWidget(description_label)

        input_row = QHBoxLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(NAME_PLACEHOLDER)
        self.name_input.returnPressed.connect(self._handle_start)
        input_row.addWidget(self.name_input, stretch=1)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start)
        input_row.addWidget(self.start_button)
        layout.addLayout(input_row)

        if web_url:
            self.web_label = QLabel(web_url, self)
            self.web_label.setAlignment(Qt.AlignCenter)
            self.web_label.setStyleSheet(Styles.get_secondary_label_style())
            layout.addWidget(self.web_label)

        layout.addStretch()

        about_row = QHBoxLayout()
        about_row.addStretch()
        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        about_row.addWidget(self.about_button)
        layout.addLayout(about_row)

    def _handle_start(self) -> None:
        self.on_start(self.name_input.text())

    def focus_name_input(self) -> None:
        self.name_input.setFocus()
        self.name_input.selectAll()
