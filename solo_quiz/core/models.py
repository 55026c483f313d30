"""Domain models for the quiz application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import KW_ONLY, dataclass

from solo_quiz.constants.quiz_constants import DEFAULT_PLAYER_NAME, FALSE_LABEL, TRUE_LABEL

# Index for multiple-choice, bool for true/false. Clients may send numeric strings.
AnswerValue = int | bool | float | str


@dataclass(frozen=True, slots=True)
class AnswerOption:
    """One selectable option: the label shown to the player and the value it resolves to."""

    label: str
    value: AnswerValue


@dataclass(frozen=True, slots=True)
class Question(ABC):
    """Abstract quiz item that presents options and judges a submitted answer.

    Variants own their answer representation: the controller and the views
    only ever see ``AnswerOption`` values and the result of ``check_answer``.
    """

    text: str
    _: KW_ONLY
    points: int = 1
    explanation: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("Question text must not be empty.")
        if isinstance(self.points, bool) or not isinstance(self.points, int) or self.points < 1:
            raise ValueError("Question points must be a positive integer.")
        object.__setattr__(self, "explanation", self.explanation or "")
        self._validate()

    def _validate(self) -> None:
        """Variant-specific validation and normalization."""

    @abstractmethod
    def enumerate_options(self) -> list[AnswerOption]:
        """Return the ordered options the player can choose from."""

    @abstractmethod
    def check_answer(self, value: AnswerValue) -> bool:
        """Return True when ``value`` is the correct answer."""

    @abstractmethod
    def option_index_for(self, value: AnswerValue) -> int | None:
        """Position of the option ``value`` resolves to, judged the same way as ``check_answer``."""

    def correct_option_indexes(self) -> tuple[int, ...]:
        """Positions in ``enumerate_options()`` that this question judges correct."""
        return tuple(
            position
            for position, option in enumerate(self.enumerate_options())
            if self.check_answer(option.value)
        )


def _as_index(value: AnswerValue) -> int | None:
    """Read "0", 0.0 and 0 alike as the first choice; anything non-integral is no index."""
    if isinstance(value, int):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


@dataclass(frozen=True, slots=True)
class MultipleChoiceQuestion(Question):
    """Question answered by picking one of several labelled choices."""

    choices: tuple[str, ...]
    correct_index: int

    def _validate(self) -> None:
        object.__setattr__(self, "choices", tuple(self.choices))
        if len(self.choices) < 2:
            raise ValueError("A multiple-choice question needs at least two choices.")
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValueError("Correct index must be an integer.")
        if not 0 <= self.correct_index < len(self.choices):
            raise ValueError(
                f"Correct index {self.correct_index} out of range for {len(self.choices)} choices."
            )

    def enumerate_options(self) -> list[AnswerOption]:
        return [AnswerOption(label=choice, value=index) for index, choice in enumerate(self.choices)]

    def check_answer(self, value: AnswerValue) -> bool:
        return _as_index(value) == self.correct_index

    def option_index_for(self, value: AnswerValue) -> int | None:
        index = _as_index(value)
        if index is None or not 0 <= index < len(self.choices):
            return None
        return index


@dataclass(frozen=True, slots=True)
class TrueFalseQuestion(Question):
    """Statement the player marks as true or false."""

    is_true: bool

    def _validate(self) -> None:
        object.__setattr__(self, "is_true", bool(self.is_true))

    def enumerate_options(self) -> list[AnswerOption]:
        return [AnswerOption(label=TRUE_LABEL, value=True), AnswerOption(label=FALSE_LABEL, value=False)]

    def check_answer(self, value: AnswerValue) -> bool:
        return bool(value) == self.is_true

    def option_index_for(self, value: AnswerValue) -> int | None:
        return 0 if bool(value) else 1


def _normalize_player_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    return cleaned or DEFAULT_PLAYER_NAME


@dataclass(slots=True)
class Player:
    """Score and correct-answer accumulator for one participant."""

    name: str = DEFAULT_PLAYER_NAME
    score: int = 0
    correct: int = 0

    def __post_init__(self) -> None:
        self.name = _normalize_player_name(self.name)

    def rename(self, name: str | None) -> None:
        self.name = _normalize_player_name(name)

    def add_points(self, points: int) -> None:
        self.score += points

    def add_correct(self) -> None:
        self.correct += 1

    def reset(self) -> None:
        self.score = 0
        self.correct = 0
