"""Quiz-related constants shared across UI and core layers."""

DEFAULT_PLAYER_NAME: str = "Guest"
DEFAULT_QUESTION_POINTS: int = 2

TRUE_LABEL: str = "True"
FALSE_LABEL: str = "False"

CORRECT_FEEDBACK: str = "Correct!"
INCORRECT_FEEDBACK: str = "Incorrect."

EMPTY_PERCENT_PLACEHOLDER: str = "—"
