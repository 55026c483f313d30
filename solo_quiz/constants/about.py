"""Static metadata describing SoloQuiz."""

APP_NAME = "SoloQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "SoloQuiz is a single-player quiz built with Qt and FastAPI. "
    "Answer multiple-choice and true/false questions in the desktop window "
    "or in the browser, and see your final score at the end."
)
