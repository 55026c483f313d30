from dataclasses import FrozenInstanceError

import pytest

from solo_quiz.core.models import (
    AnswerOption,
    MultipleChoiceQuestion,
    Player,
    Question,
    TrueFalseQuestion,
)


def make_choice_question(correct_index=2, points=1):
    return MultipleChoiceQuestion(
        "Which one is not an OOP principle?",
        ["Encapsulation", "Inheritance", "Compilation", "Polymorphism"],
        correct_index,
        points=points,
    )


def test_question_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Question("Abstract question")


def test_multiple_choice_options_are_indexed_in_order():
    question = make_choice_question()
    options = question.enumerate_options()
    assert [option.value for option in options] == [0, 1, 2, 3]
    assert options[2] == AnswerOption(label="Compilation", value=2)
    assert question.enumerate_options() == options


def test_multiple_choice_only_correct_index_is_correct():
    question = make_choice_question(correct_index=2)
    assert question.check_answer(2)
    for index in (0, 1, 3):
        assert not question.check_answer(index)


def test_multiple_choice_accepts_numeric_equivalents():
    question = make_choice_question(correct_index=0)
    assert question.check_answer("0")
    assert question.check_answer(0.0)
    assert not question.check_answer("1")
    assert not question.check_answer("first")
    assert not question.check_answer(None)


def test_true_false_exposes_true_then_false():
    question = TrueFalseQuestion("Composition is a has-a relationship.", True)
    options = question.enumerate_options()
    assert len(options) == 2
    assert [option.value for option in options] == [True, False]
    assert [option.label for option in options] == ["True", "False"]


@pytest.mark.parametrize("is_true", [True, False])
def test_true_false_judges_against_stored_value(is_true):
    question = TrueFalseQuestion("Statement", is_true)
    assert question.check_answer(is_true)
    assert not question.check_answer(not is_true)


def test_correct_option_indexes_per_variant():
    assert make_choice_question(correct_index=3).correct_option_indexes() == (3,)
    assert TrueFalseQuestion("Statement", True).correct_option_indexes() == (0,)
    assert TrueFalseQuestion("Statement", False).correct_option_indexes() == (1,)


def test_question_defaults_and_immutability():
    question = TrueFalseQuestion("Statement", False)
    assert question.points == 1
    assert question.explanation == ""
    with pytest.raises(FrozenInstanceError):
        question.points = 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "   ", "choices": ["A", "B"], "correct_index": 0},
        {"text": "Q", "choices": ["A"], "correct_index": 0},
        {"text": "Q", "choices": ["A", "B"], "correct_index": 2},
        {"text": "Q", "choices": ["A", "B"], "correct_index": -1},
        {"text": "Q", "choices": ["A", "B"], "correct_index": 0, "points": 0},
    ],
)
def test_malformed_multiple_choice_is_rejected(kwargs):
    with pytest.raises(ValueError):
        MultipleChoiceQuestion(**kwargs)


def test_player_name_defaults_to_guest():
    assert Player().name == "Guest"
    assert Player("").name == "Guest"
    assert Player("  Ada  ").name == "Ada"

    player = Player("Ada")
    player.rename("")
    assert player.name == "Guest"


def test_player_accumulates_and_resets():
    player = Player("Ada")
    player.add_points(2)
    player.add_points(3)
    player.add_correct()
    assert (player.score, player.correct) == (5, 1)

    player.reset()
    assert (player.score, player.correct) == (0, 0)
    assert player.name == "Ada"


def test_multiple_choice_out_of_range_numbers_are_incorrect():
    question = make_choice_question(correct_index=0)
    assert not question.check_answer(10**400)
    assert not question.check_answer("1e400")
    assert not question.check_answer(0.5)


def test_option_index_follows_answer_coercion():
    question = make_choice_question()
    assert question.option_index_for("1") == 1
    assert question.option_index_for(1.0) == 1
    assert question.option_index_for(3) == 3
    assert question.option_index_for(5) is None
    assert question.option_index_for(10**400) is None
    assert question.option_index_for("x") is None


def test_true_false_option_index():
    question = TrueFalseQuestion("Statement", False)
    assert question.option_index_for(True) == 0
    assert question.option_index_for(False) == 1
