"""
drinkmatch Quiz.

Static question set plus the wizard that walks a user through it.
"""

from .questions import QUIZ_QUESTIONS, QUESTION_IDS, Question, QuizOption
from .wizard import QuizAnswers, QuizError, QuizWizard

__all__ = [
    "QUIZ_QUESTIONS",
    "QUESTION_IDS",
    "Question",
    "QuizOption",
    "QuizAnswers",
    "QuizError",
    "QuizWizard",
]
