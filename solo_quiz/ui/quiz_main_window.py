"""Qt main window switching between the start, question and result screens."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from solo_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from solo_quiz.constants.ui_constants import (
    STATE_REFRESH_INTERVAL_MS,
    WEB_URL_TEMPLATE,
    WINDOW_TITLE,
)
from solo_quiz.core.models import AnswerValue
from solo_quiz.core.quiz_manager import QuizManager, QuizSnapshot
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.components.question_panel import QuestionPanel
from solo_quiz.ui.components.result_panel import ResultPanel
from solo_quiz.ui.components.start_panel import StartPanel
from solo_quiz.ui.dialog_helpers import show_info


class Screen(Enum):
    """Which panel the window is showing."""

    START = auto()
    QUESTION = auto()
    RESULT = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window for playing the quiz."""

    def __init__(self, quiz_manager: QuizManager, web_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(640, 520)

        self.quiz_manager = quiz_manager
        self.web_url = web_url
        self._screen = Screen.START
        self._rendered_revision: int | None = None

        self._build_ui()
        self._configure_refresh_timer()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)
        web_text = WEB_URL_TEMPLATE.format(url=self.web_url) if self.web_url else None
        self.start_panel = StartPanel(
            web_text,
            on_start=self._handle_start,
            on_about=self._handle_about,
            parent=self,
        )
        self.question_panel = QuestionPanel(
            on_select=self._handle_select,
            on_submit=self._handle_submit,
            on_next=self._handle_next,
            parent=self,
        )
        self.result_panel = ResultPanel(on_restart=self._handle_restart, parent=self)

        self.screen_stack.addWidget(self.start_panel)
        self.screen_stack.addWidget(self.question_panel)
        self.screen_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.screen_stack)

        self._set_screen(Screen.START)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATE_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        # Picks up moves made from the browser page.
        if self._screen == Screen.START:
            return
        if self.quiz_manager.get_revision() != self._rendered_revision:
            self._render(self.quiz_manager.get_snapshot())

    def _set_screen(self, screen: Screen) -> None:
        self._screen = screen
        index_map = {
            Screen.START: 0,
            Screen.QUESTION: 1,
            Screen.RESULT: 2,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])

    def _render(self, snapshot: QuizSnapshot) -> None:
        self._rendered_revision = snapshot.revision
        if snapshot.finished and snapshot.summary is not None:
            self.result_panel.show_summary(snapshot.summary)
            self._set_screen(Screen.RESULT)
            return
        self.question_panel.render(snapshot)
        self._set_screen(Screen.QUESTION)

    def _handle_start(self, player_name: str) -> None:
        self._render(self.quiz_manager.start(player_name))

    def _handle_select(self, value: AnswerValue) -> None:
        self.quiz_manager.select_answer(value)
        self._render(self.quiz_manager.get_snapshot())

    def _handle_submit(self) -> None:
        self.quiz_manager.submit()
        self._render(self.quiz_manager.get_snapshot())

    def _handle_next(self) -> None:
        self.quiz_manager.advance()
        self._render(self.quiz_manager.get_snapshot())

    def _handle_restart(self) -> None:
        self._set_screen(Screen.START)
        self.start_panel.focus_name_input()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)
