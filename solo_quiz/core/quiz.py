"""Quiz controller: sequences questions and tracks per-question answer state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
import logging

from solo_quiz.constants.quiz_constants import (
    CORRECT_FEEDBACK,
    EMPTY_PERCENT_PLACEHOLDER,
    INCORRECT_FEEDBACK,
)
from solo_quiz.core.models import AnswerValue, Player, Question

logger = logging.getLogger(__name__)


class QuizState(Enum):
    """Where the session stands for the current question."""

    AWAITING_SELECTION = auto()
    AWAITING_SUBMISSION = auto()
    ANSWERED = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Outcome of judging the current question."""

    is_correct: bool
    points_awarded: int
    selected_answer: AnswerValue
    correct_option_indexes: tuple[int, ...]
    feedback: str


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Final figures for a play-through."""

    player_name: str
    score: int
    correct: int
    total: int
    max_score: int
    percent: int

    def format_percent(self) -> str:
        if self.total == 0:
            return EMPTY_PERCENT_PLACEHOLDER
        return f"{self.percent}%"


def _percent_correct(correct: int, total: int) -> int:
    """Round 100 * correct / total half up; an empty quiz scores 0."""
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)


class Quiz:
    """Owns the question sequence and the player for one session.

    Invalid transitions (selecting after judging, submitting with no
    selection, submitting twice, moving past the end) are ignored and
    reported through the return value, so a stray click can never
    double-score or break the session.
    """

    def __init__(self, questions: Sequence[Question], player: Player | None = None) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self.player = player if player is not None else Player()
        self._index = 0
        self._answered = False
        self._selected_answer: AnswerValue | None = None
        self._last_result: SubmissionResult | None = None

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def index(self) -> int:
        return self._index

    @property
    def answered(self) -> bool:
        return self._answered

    @property
    def selected_answer(self) -> AnswerValue | None:
        return self._selected_answer

    @property
    def last_result(self) -> SubmissionResult | None:
        """Result for the current question once it has been judged."""
        return self._last_result

    @property
    def state(self) -> QuizState:
        if self.is_finished():
            return QuizState.FINISHED
        if self._answered:
            return QuizState.ANSWERED
        if self._selected_answer is None:
            return QuizState.AWAITING_SELECTION
        return QuizState.AWAITING_SUBMISSION

    def current(self) -> Question | None:
        if self.is_finished():
            return None
        return self._questions[self._index]

    def is_finished(self) -> bool:
        return self._index >= len(self._questions)

    def remaining_question_count(self) -> int:
        """Questions after the current one."""
        return max(0, len(self._questions) - (self._index + 1))

    def select_answer(self, value: AnswerValue | None) -> bool:
        """Record the pending answer. Re-selecting before submit overwrites it."""
        if value is None:
            logger.info("Ignoring empty selection for question %d", self._index + 1)
            return False
        if self.is_finished() or self._answered:
            logger.info("Ignoring selection in state %s", self.state.name)
            return False
        self._selected_answer = value
        logger.debug("Selected %r for question %d", value, self._index + 1)
        return True

    def submit(self) -> SubmissionResult | None:
        """Judge the pending answer once and award the question's points if correct."""
        question = self.current()
        if question is None or self._answered or self._selected_answer is None:
            logger.info("Ignoring submit in state %s", self.state.name)
            return None

        is_correct = question.check_answer(self._selected_answer)
        if is_correct:
            self.player.add_points(question.points)
            self.player.add_correct()
        self._answered = True

        feedback = question.explanation or (CORRECT_FEEDBACK if is_correct else INCORRECT_FEEDBACK)
        self._last_result = SubmissionResult(
            is_correct=is_correct,
            points_awarded=question.points if is_correct else 0,
            selected_answer=self._selected_answer,
            correct_option_indexes=question.correct_option_indexes(),
            feedback=feedback,
        )
        logger.debug(
            "Question %d judged %s; score now %d",
            self._index + 1,
            "correct" if is_correct else "incorrect",
            self.player.score,
        )
        return self._last_result

    def advance(self) -> Question | None:
        """Move to the next question and return it, or None once the quiz is finished."""
        if self.is_finished():
            return None
        self._index += 1
        self._clear_question_state()
        if self.is_finished():
            logger.debug("Quiz finished for %s with score %d", self.player.name, self.player.score)
            return None
        return self._questions[self._index]

    def reset(self, player_name: str | None = None) -> Question | None:
        """Start a fresh play-through and return the first question."""
        self._index = 0
        self._clear_question_state()
        self.player.reset()
        if player_name is not None:
            self.player.rename(player_name)
        return self.current()

    def summary(self) -> QuizSummary:
        total = len(self._questions)
        return QuizSummary(
            player_name=self.player.name,
            score=self.player.score,
            correct=self.player.correct,
            total=total,
            max_score=sum(question.points for question in self._questions),
            percent=_percent_correct(self.player.correct, total),
        )

    def _clear_question_state(self) -> None:
        self._answered = False
        self._selected_answer = None
        self._last_result = None
