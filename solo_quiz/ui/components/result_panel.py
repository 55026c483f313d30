"""Component for the final result screen."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from solo_quiz.constants.ui_constants import RESTART_BUTTON, RESULT_TITLE
from solo_quiz.core.quiz import QuizSummary
from solo_quiz.styling.styles import Styles


class ResultPanel(QWidget):
    """Shows score, correct count and percentage once the quiz is finished."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        title_label = QLabel(RESULT_TITLE, self)
        title_label.setAlignment(Qt.AlignCenter)
        title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title_label)

        self.player_label = QLabel("", self)
        self.score_label = QLabel("", self)
        self.correct_label = QLabel("", self)
        self.percent_label = QLabel("", self)
        for label in (self.player_label, self.score_label, self.correct_label, self.percent_label):
            label.setAlignment(Qt.AlignCenter)
            layout.addWidget(label)

        layout.addStretch()

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_summary(self, summary: QuizSummary) -> None:
        self.player_label.setText(summary.player_name)
        self.score_label.setText(f"Score: {summary.score} / {summary.max_score}")
        self.correct_label.setText(f"Correct answers: {summary.correct} / {summary.total}")
        self.percent_label.setText(f"Percent: {summary.format_percent()}")
