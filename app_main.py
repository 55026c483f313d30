"""Application entry point for SoloQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.core.question_bank import build_sample_questions
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.server.api_server import start_api_server
from solo_quiz.ui.quiz_main_window import QuizMainWindow
from solo_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the web server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting SoloQuiz…")

    quiz_manager = QuizManager(build_sample_questions())
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    web_url = f"http://localhost:{DEFAULT_PORT}/"
    logger.info("Browser version available at %s", web_url)

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager, web_url=web_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
