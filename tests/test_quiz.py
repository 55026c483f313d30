import logging

from solo_quiz.core.models import MultipleChoiceQuestion, Player, TrueFalseQuestion
from solo_quiz.core.question_bank import build_sample_questions
from solo_quiz.core.quiz import Quiz, QuizState, _percent_correct


def answer(quiz, value):
    assert quiz.select_answer(value)
    result = quiz.submit()
    assert result is not None
    quiz.advance()
    return result


def test_new_quiz_awaits_selection():
    quiz = Quiz(build_sample_questions())
    assert quiz.index == 0
    assert quiz.state == QuizState.AWAITING_SELECTION
    assert quiz.current() is quiz.questions[0]
    assert not quiz.answered
    assert quiz.selected_answer is None


def test_selection_can_be_changed_before_submit():
    quiz = Quiz(build_sample_questions())
    assert quiz.select_answer(1)
    assert quiz.state == QuizState.AWAITING_SUBMISSION
    assert quiz.select_answer(0)
    assert quiz.selected_answer == 0


def test_submit_without_selection_is_ignored():
    quiz = Quiz(build_sample_questions())
    assert quiz.submit() is None
    assert quiz.state == QuizState.AWAITING_SELECTION
    assert quiz.player.score == 0


def test_second_submit_never_rescores():
    quiz = Quiz(build_sample_questions())
    quiz.select_answer(0)
    first = quiz.submit()
    assert first.is_correct
    assert first.points_awarded == 2
    assert quiz.submit() is None
    assert not quiz.select_answer(1)
    assert (quiz.player.score, quiz.player.correct) == (2, 1)
    assert quiz.state == QuizState.ANSWERED


def test_weighted_question_adds_points_but_one_correct():
    quiz = Quiz([TrueFalseQuestion("Statement", True, points=2)])
    quiz.select_answer(True)
    quiz.submit()
    assert quiz.player.score == 2
    assert quiz.player.correct == 1


def test_wrong_answer_reports_correct_option_and_fallback_feedback():
    quiz = Quiz([MultipleChoiceQuestion("Pick B", ["A", "B", "C"], 1)])
    quiz.select_answer(2)
    result = quiz.submit()
    assert not result.is_correct
    assert result.points_awarded == 0
    assert result.correct_option_indexes == (1,)
    assert result.feedback == "Incorrect."
    assert quiz.player.score == 0


def test_explanation_is_used_as_feedback():
    quiz = Quiz([TrueFalseQuestion("Statement", False, explanation="Because.")])
    quiz.select_answer(False)
    assert quiz.submit().feedback == "Because."


def test_advance_clears_question_state():
    quiz = Quiz(build_sample_questions())
    quiz.select_answer(0)
    quiz.submit()
    next_question = quiz.advance()
    assert next_question is quiz.questions[1]
    assert quiz.index == 1
    assert not quiz.answered
    assert quiz.selected_answer is None
    assert quiz.last_result is None
    assert quiz.state == QuizState.AWAITING_SELECTION


def test_full_session_scores_weighted_answers():
    quiz = Quiz(build_sample_questions(), Player("Ada"))
    # Correct answers are 0, 1, False, 2, True; miss the 2nd and 4th.
    answers = [0, 0, False, 0, True]
    previous = (0, 0)
    for value in answers:
        answer(quiz, value)
        current = (quiz.player.score, quiz.player.correct)
        assert current >= previous
        previous = current

    assert quiz.is_finished()
    assert quiz.state == QuizState.FINISHED
    assert quiz.current() is None
    summary = quiz.summary()
    assert summary.player_name == "Ada"
    assert summary.score == 6
    assert summary.correct == 3
    assert summary.total == 5
    assert summary.max_score == 10
    assert summary.percent == 60
    assert summary.format_percent() == "60%"


def test_advance_past_end_is_ignored():
    quiz = Quiz([TrueFalseQuestion("Statement", True)])
    assert quiz.advance() is None
    assert quiz.is_finished()
    assert quiz.advance() is None
    assert quiz.index == 1


def test_empty_quiz_is_finished_with_zero_percent():
    quiz = Quiz([])
    assert quiz.is_finished()
    assert quiz.index == 0
    assert quiz.current() is None
    assert quiz.state == QuizState.FINISHED
    assert not quiz.select_answer(0)
    assert quiz.submit() is None
    summary = quiz.summary()
    assert (summary.correct, summary.total, summary.percent) == (0, 0, 0)
    assert summary.format_percent() == "—"


def test_reset_restores_initial_state():
    quiz = Quiz(build_sample_questions(), Player("Ada"))
    answer(quiz, 0)
    quiz.select_answer(1)
    quiz.submit()

    first = quiz.reset()
    assert first is quiz.questions[0]
    assert quiz.index == 0
    assert (quiz.player.score, quiz.player.correct) == (0, 0)
    assert not quiz.answered
    assert quiz.selected_answer is None
    assert quiz.player.name == "Ada"


def test_reset_after_finish_renames_player():
    quiz = Quiz([TrueFalseQuestion("Statement", True)])
    answer(quiz, True)
    assert quiz.is_finished()
    quiz.reset("Grace")
    assert quiz.state == QuizState.AWAITING_SELECTION
    assert quiz.player.name == "Grace"


def test_percent_rounds_half_up():
    assert _percent_correct(3, 5) == 60
    assert _percent_correct(1, 8) == 13
    assert _percent_correct(3, 8) == 38
    assert _percent_correct(2, 3) == 67
    assert _percent_correct(0, 0) == 0


def test_ignored_submit_is_logged(caplog):
    quiz = Quiz(build_sample_questions())
    with caplog.at_level(logging.INFO, logger="solo_quiz.core.quiz"):
        quiz.submit()
    assert "Ignoring submit" in caplog.text
