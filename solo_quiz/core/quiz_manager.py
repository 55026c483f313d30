"""Thread-safe facade over the quiz session shared by the Qt window and the web API."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from threading import Lock

from solo_quiz.core.markdown_renderer import renderer
from solo_quiz.core.models import AnswerOption, AnswerValue, Player, Question
from solo_quiz.core.quiz import Quiz, QuizState, QuizSummary, SubmissionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Everything a view needs to draw the current screen."""

    state: QuizState
    revision: int
    player_name: str
    score: int
    correct: int
    position: int
    total: int
    question_text: str | None = None
    question_html: str | None = None
    points: int | None = None
    options: list[AnswerOption] = field(default_factory=list)
    selected_answer: AnswerValue | None = None
    selected_option_index: int | None = None
    correct_option_indexes: tuple[int, ...] = ()
    is_correct: bool | None = None
    feedback: str | None = None
    feedback_html: str | None = None
    remaining: int = 0
    summary: QuizSummary | None = None

    @property
    def finished(self) -> bool:
        return self.state == QuizState.FINISHED

    @property
    def answered(self) -> bool:
        return self.state == QuizState.ANSWERED

    def to_dict(self) -> dict[str, object]:
        summary = None
        if self.summary is not None:
            summary = {
                "player_name": self.summary.player_name,
                "score": self.summary.score,
                "correct": self.summary.correct,
                "total": self.summary.total,
                "max_score": self.summary.max_score,
                "percent": self.summary.percent,
                "percent_text": self.summary.format_percent(),
            }
        return {
            "state": self.state.name.lower(),
            "revision": self.revision,
            "player_name": self.player_name,
            "score": self.score,
            "correct": self.correct,
            "position": self.position,
            "total": self.total,
            "question_text": self.question_text,
            "question_html": self.question_html,
            "points": self.points,
            "options": [{"label": option.label, "value": option.value} for option in self.options],
            "selected_answer": self.selected_answer,
            "selected_option_index": self.selected_option_index,
            "correct_option_indexes": list(self.correct_option_indexes),
            "is_correct": self.is_correct,
            "feedback": self.feedback,
            "feedback_html": self.feedback_html,
            "remaining": self.remaining,
            "summary": summary,
        }


class QuizManager:
    """Serializes access to one ``Quiz`` and hands out immutable snapshots.

    Every successful mutation bumps ``revision`` so polling views can skip
    redraws when nothing changed.
    """

    def __init__(self, questions: Sequence[Question], player: Player | None = None) -> None:
        self._lock = Lock()
        self._quiz = Quiz(questions, player)
        self._revision = 0

    def start(self, player_name: str | None = None) -> QuizSnapshot:
        with self._lock:
            self._quiz.reset(player_name)
            self._bump()
            logger.info(
                "Quiz started for %s (%d questions)",
                self._quiz.player.name,
                len(self._quiz.questions),
            )
            return self._snapshot()

    def select_answer(self, value: AnswerValue | None) -> bool:
        with self._lock:
            accepted = self._quiz.select_answer(value)
            if accepted:
                self._bump()
            return accepted

    def submit(self) -> SubmissionResult | None:
        with self._lock:
            result = self._quiz.submit()
            if result is not None:
                self._bump()
            return result

    def advance(self) -> bool:
        """Move past the current question. Returns False when the quiz was already finished."""
        with self._lock:
            if self._quiz.is_finished():
                return False
            question = self._quiz.advance()
            self._bump()
            if question is None:
                summary = self._quiz.summary()
                logger.info(
                    "Quiz finished: %s scored %d (%d/%d correct)",
                    summary.player_name,
                    summary.score,
                    summary.correct,
                    summary.total,
                )
            return True

    def get_snapshot(self) -> QuizSnapshot:
        with self._lock:
            return self._snapshot()

    def get_summary(self) -> QuizSummary:
        with self._lock:
            return self._quiz.summary()

    def get_revision(self) -> int:
        with self._lock:
            return self._revision

    def get_question_count(self) -> int:
        with self._lock:
            return len(self._quiz.questions)

    def _bump(self) -> None:
        self._revision += 1

    def _snapshot(self) -> QuizSnapshot:
        quiz = self._quiz
        player = quiz.player
        total = len(quiz.questions)
        question = quiz.current()
        base = {
            "state": quiz.state,
            "revision": self._revision,
            "player_name": player.name,
            "score": player.score,
            "correct": player.correct,
            "position": min(quiz.index + 1, total),
            "total": total,
        }
        if question is None:
            return QuizSnapshot(**base, summary=quiz.summary())

        options = question.enumerate_options()
        result = quiz.last_result
        return QuizSnapshot(
            **base,
            question_text=question.text,
            question_html=renderer.render_fragment(question.text),
            points=question.points,
            options=options,
            selected_answer=quiz.selected_answer,
            selected_option_index=(
                question.option_index_for(quiz.selected_answer)
                if quiz.selected_answer is not None
                else None
            ),
            # Correct options stay hidden until the question has been judged.
            correct_option_indexes=result.correct_option_indexes if result else (),
            is_correct=result.is_correct if result else None,
            feedback=result.feedback if result else None,
            feedback_html=renderer.render_fragment(result.feedback) if result else None,
            remaining=quiz.remaining_question_count(),
        )
