"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "SoloQuiz"
STATE_REFRESH_INTERVAL_MS: int = 1000

START_TITLE: str = "Object-Oriented Programming Quiz"
START_DESCRIPTION: str = "Enter your name and press Start. Leave it empty to play as Guest."
NAME_PLACEHOLDER: str = "Your name"
START_BUTTON: str = "Start"
ABOUT_BUTTON: str = "About"

SUBMIT_BUTTON: str = "Submit Answer"
NEXT_BUTTON: str = "Next Question"
FINISH_BUTTON: str = "Show Result"

RESULT_TITLE: str = "Quiz Complete"
RESTART_BUTTON: str = "Play Again"

PROGRESS_TEMPLATE: str = "Question {position}/{total}"
SCORE_TEMPLATE: str = "Score: {score}"
WEB_URL_TEMPLATE: str = "Also playable in the browser: {url}"
