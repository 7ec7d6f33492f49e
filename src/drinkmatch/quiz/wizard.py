"""
Quiz Wizard - step-by-step answer collection.

Holds a cursor into the question list plus the answers given so far.
Everything else (progress, "is this the last step?") is derived.

The wizard does NOT enforce that a question is answered before moving on;
callers gate `advance()` on `can_advance` (the Next button is disabled).
"""

import logging
from typing import Sequence

from .questions import QUIZ_QUESTIONS, Question

logger = logging.getLogger(__name__)

# question id -> selected option value
QuizAnswers = dict[str, str]


class QuizError(Exception):
    """Raised when the wizard is driven out of order."""


class QuizWizard:
    """Walks one user through the configured questions."""

    def __init__(self, questions: Sequence[Question] = QUIZ_QUESTIONS):
        if not questions:
            raise QuizError("Quiz needs at least one question")
        self._questions: tuple[Question, ...] = tuple(questions)
        self._index = 0
        self._answers: QuizAnswers = {}
        # +1 forward, -1 back; only used for transition hints
        self.direction = 1

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_question(self) -> Question:
        return self._questions[self._index]

    @property
    def current_answer(self) -> str | None:
        return self._answers.get(self.current_question.id)

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def question_number(self) -> int:
        return self._index + 1

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == len(self._questions) - 1

    @property
    def can_advance(self) -> bool:
        return self.current_answer is not None

    @property
    def progress(self) -> float:
        """Fraction of the quiz reached, counting the current question."""
        return (self._index + 1) / len(self._questions)

    @property
    def answers(self) -> QuizAnswers:
        """Copy of the answers given so far."""
        return dict(self._answers)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def select_answer(self, question_id: str, value: str) -> None:
        """Record (or overwrite) the answer to the current question."""
        current = self.current_question
        if question_id != current.id:
            raise QuizError(
                f"Answer for '{question_id}' but current question is '{current.id}'"
            )
        self._answers[question_id] = value

    def advance(self) -> QuizAnswers | None:
        """
        Move to the next question.

        Returns None while there are questions left. On the last question,
        returns a copy of the full answer set: the quiz is complete and the
        caller owns the answers from here on.
        """
        if self.is_last:
            logger.debug(f"Quiz complete with {len(self._answers)} answers")
            return dict(self._answers)

        self.direction = 1
        self._index += 1
        return None

    def retreat(self) -> bool:
        """
        Move to the previous question.

        Returns True when already on the first question, meaning the user
        wants out of the quiz altogether. The cursor never goes below zero.
        """
        if self.is_first:
            return True

        self.direction = -1
        self._index -= 1
        return False

    def choose(self, value: str) -> QuizAnswers | None:
        """Pick an option for the current question and move straight on."""
        self.select_answer(self.current_question.id, value)
        return self.advance()
