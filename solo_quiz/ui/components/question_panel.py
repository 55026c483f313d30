"""Component for answering the current question."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from solo_quiz.constants.ui_constants import (
    FINISH_BUTTON,
    NEXT_BUTTON,
    PROGRESS_TEMPLATE,
    SCORE_TEMPLATE,
    SUBMIT_BUTTON,
)
from solo_quiz.core.models import AnswerValue
from solo_quiz.core.quiz import QuizState
from solo_quiz.core.quiz_manager import QuizSnapshot
from solo_quiz.styling.styles import Styles, choice_style_for


class QuestionPanel(QWidget):
    """Renders one question with its option buttons, feedback and navigation."""

    def __init__(
        self,
        on_select: Callable[[AnswerValue], None],
        on_submit: Callable[[], None],
        on_next: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select = on_select
        self.on_submit = on_submit
        self.on_next = on_next
        self.option_buttons: list[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_secondary_label_style())
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.score_label = QLabel("", self)
        self.score_label.setStyleSheet(Styles.get_secondary_label_style())
        header_row.addWidget(self.score_label)
        layout.addLayout(header_row)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet("font-size: 13pt;")
        layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setTextFormat(Qt.RichText)
        self.feedback_label.setWordWrap(True)
        layout.addWidget(self.feedback_label)

        layout.addStretch()

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self.on_submit)
        button_row.addWidget(self.submit_button)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self.on_next)
        button_row.addWidget(self.next_button)
        layout.addLayout(button_row)

    def render(self, snapshot: QuizSnapshot) -> None:
        self.progress_label.setText(PROGRESS_TEMPLATE.format(position=snapshot.position, total=snapshot.total))
        self.score_label.setText(SCORE_TEMPLATE.format(score=snapshot.score))
        self.question_label.setText(snapshot.question_html or "")
        self.feedback_label.setText(snapshot.feedback_html or "")
        self._rebuild_option_buttons(snapshot)

        self.submit_button.setEnabled(snapshot.state == QuizState.AWAITING_SUBMISSION)
        self.next_button.setEnabled(snapshot.answered)
        self.next_button.setText(NEXT_BUTTON if snapshot.remaining > 0 else FINISH_BUTTON)

    def _rebuild_option_buttons(self, snapshot: QuizSnapshot) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for index, option in enumerate(snapshot.options):
            button = QPushButton(option.label, self)
            style = choice_style_for(
                index,
                snapshot.selected_option_index,
                snapshot.correct_option_indexes,
                snapshot.answered,
            )
            button.setStyleSheet(Styles.get_choice_style(style))
            button.setEnabled(not snapshot.answered)
            button.clicked.connect(lambda _checked=False, value=option.value: self.on_select(value))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)
