"""Built-in question set. Questions live in memory only."""

from __future__ import annotations

from solo_quiz.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from solo_quiz.core.models import MultipleChoiceQuestion, Question, TrueFalseQuestion


def build_sample_questions() -> list[Question]:
    """Return the object-oriented programming quiz shipped with the app."""
    return [
        MultipleChoiceQuestion(
            "Which statement describes **encapsulation** in OOP?",
            (
                "Bundling data and the methods that work on it inside a class",
                "Inheriting attributes from a parent class",
                "Methods with the same name behaving differently",
                "Creating objects from a class",
            ),
            0,
            points=DEFAULT_QUESTION_POINTS,
            explanation="Encapsulation hides internal details and exposes them through public methods.",
        ),
        MultipleChoiceQuestion(
            "What does **polymorphism** refer to?",
            (
                "One object holding many values",
                "One method taking many forms",
                "One class with many instances",
                "One program split into many files",
            ),
            1,
            points=DEFAULT_QUESTION_POINTS,
            explanation="Polymorphism: the same method behaves differently depending on the object's actual type.",
        ),
        TrueFalseQuestion(
            "An abstract class can be instantiated directly.",
            False,
            points=DEFAULT_QUESTION_POINTS,
            explanation="An abstract class is a template; a subclass must inherit from it.",
        ),
        MultipleChoiceQuestion(
            "Which of these is *not* a core principle of OOP?",
            ("Encapsulation", "Inheritance", "Compilation", "Polymorphism"),
            2,
            points=DEFAULT_QUESTION_POINTS,
            explanation="The core principles are encapsulation, inheritance, polymorphism and abstraction.",
        ),
        TrueFalseQuestion(
            "Composition is a *has-a* relationship, for example a car has wheels.",
            True,
            points=DEFAULT_QUESTION_POINTS,
            explanation="Correct: a car is composed of wheels.",
        ),
    ]
