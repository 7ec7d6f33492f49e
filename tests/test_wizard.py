"""
Tests for the quiz question set and the QuizWizard controller.
"""

import pytest

from drinkmatch.quiz import QUESTION_IDS, QUIZ_QUESTIONS, Question, QuizError, QuizOption, QuizWizard


def _two_questions() -> tuple[Question, ...]:
    return (
        Question(
            id="mood",
            question="How are you feeling?",
            options=(QuizOption(value="happy", label="Happy"), QuizOption(value="tired", label="Tired")),
        ),
        Question(
            id="temp",
            question="Hot or cold?",
            options=(QuizOption(value="hot", label="Hot", icon="🔥"), QuizOption(value="cold", label="Cold")),
        ),
    )


class TestQuestionSet:
    """Test the static question configuration."""

    def test_covers_every_prompt_field(self):
        assert QUESTION_IDS == (
            "age_group",
            "gender",
            "region",
            "setting",
            "time_of_day",
            "budget",
            "allergies",
        )

    def test_ids_unique(self):
        assert len(set(QUESTION_IDS)) == len(QUIZ_QUESTIONS)

    def test_every_question_has_options(self):
        for question in QUIZ_QUESTIONS:
            assert question.options, f"{question.id} has no options"
            values = question.option_values()
            assert len(values) == len(set(values)), f"{question.id} has duplicate values"

    def test_questions_are_immutable(self):
        with pytest.raises(Exception):
            QUIZ_QUESTIONS[0].id = "changed"

    def test_icon_optional(self):
        option = QuizOption(value="x", label="X")
        assert option.icon is None


class TestWizardNavigation:
    """Test cursor movement, progress and completion."""

    def test_starts_on_first_question(self):
        wizard = QuizWizard()
        assert wizard.index == 0
        assert wizard.is_first
        assert wizard.current_question.id == "age_group"
        assert wizard.answers == {}

    def test_rejects_empty_question_list(self):
        with pytest.raises(QuizError):
            QuizWizard(())

    def test_progress_counts_current_question(self):
        wizard = QuizWizard(_two_questions())
        assert wizard.progress == 0.5
        assert wizard.question_number == 1
        wizard.select_answer("mood", "happy")
        wizard.advance()
        assert wizard.progress == 1.0
        assert wizard.question_number == 2
        assert wizard.is_last

    def test_advance_moves_forward(self):
        wizard = QuizWizard(_two_questions())
        wizard.select_answer("mood", "tired")
        assert wizard.advance() is None
        assert wizard.current_question.id == "temp"
        assert wizard.direction == 1

    def test_advance_on_last_question_completes(self):
        wizard = QuizWizard(_two_questions())
        wizard.select_answer("mood", "happy")
        wizard.advance()
        wizard.select_answer("temp", "cold")

        answers = wizard.advance()

        assert answers == {"mood": "happy", "temp": "cold"}
        assert wizard.index == 1  # cursor stays in bounds

    def test_completed_answers_are_a_copy(self):
        wizard = QuizWizard(_two_questions())
        wizard.choose("happy")
        answers = wizard.choose("hot")
        answers["mood"] = "tampered"
        assert wizard.answers["mood"] == "happy"

    def test_retreat_moves_back(self):
        wizard = QuizWizard(_two_questions())
        wizard.choose("happy")
        assert wizard.retreat() is False
        assert wizard.index == 0
        assert wizard.direction == -1

    def test_retreat_from_first_question_signals_exit(self):
        wizard = QuizWizard(_two_questions())
        assert wizard.retreat() is True
        assert wizard.index == 0

    def test_retreat_keeps_answers(self):
        wizard = QuizWizard(_two_questions())
        wizard.choose("happy")
        wizard.retreat()
        assert wizard.current_answer == "happy"

    def test_full_quiz_yields_one_answer_per_question(self):
        wizard = QuizWizard()
        answers = None
        for question in QUIZ_QUESTIONS:
            answers = wizard.choose(question.options[0].value)

        assert answers is not None
        assert set(answers) == set(QUESTION_IDS)
        assert len(answers) == len(QUIZ_QUESTIONS)


class TestWizardAnswers:
    """Test answer recording and the can_advance gate."""

    def test_can_advance_requires_answer(self):
        wizard = QuizWizard(_two_questions())
        assert wizard.can_advance is False
        wizard.select_answer("mood", "happy")
        assert wizard.can_advance is True

    def test_next_question_starts_unanswered(self):
        wizard = QuizWizard(_two_questions())
        wizard.choose("happy")
        assert wizard.current_answer is None
        assert wizard.can_advance is False

    def test_select_overwrites(self):
        wizard = QuizWizard(_two_questions())
        wizard.select_answer("mood", "happy")
        wizard.select_answer("mood", "tired")
        assert wizard.answers == {"mood": "tired"}

    def test_select_for_other_question_rejected(self):
        wizard = QuizWizard(_two_questions())
        with pytest.raises(QuizError, match="current question is 'mood'"):
            wizard.select_answer("temp", "hot")
        assert wizard.answers == {}

    def test_unknown_ids_never_recorded(self):
        wizard = QuizWizard(_two_questions())
        with pytest.raises(QuizError):
            wizard.select_answer("not_a_question", "x")
        assert "not_a_question" not in wizard.answers

    def test_value_not_validated_against_options(self):
        wizard = QuizWizard(_two_questions())
        wizard.select_answer("mood", "custom")
        assert wizard.current_answer == "custom"
