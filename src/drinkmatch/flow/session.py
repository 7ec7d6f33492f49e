"""
Drink Session.

Owns one user's AppState, the quiz wizard while collecting, and the single
outstanding recommendation task while generating. Every phase change goes
through flow.state.transition().
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping

from drinkmatch.flow.state import (
    INITIAL_STATE,
    AppState,
    Complete,
    Event,
    ExitQuiz,
    Phase,
    Resolved,
    Restart,
    Start,
    transition,
)
from drinkmatch.quiz.questions import QUIZ_QUESTIONS, Question
from drinkmatch.quiz.wizard import QuizAnswers, QuizError, QuizWizard
from drinkmatch.recommend.models import ERROR_FALLBACK_RESULT, DrinkResult
from drinkmatch.recommend.orchestrator import generate_drink

logger = logging.getLogger(__name__)

DrinkGenerator = Callable[[Mapping[str, str], str | None], Awaitable[DrinkResult]]


class DrinkSession:
    """
    One user's trip through landing, quiz, generation and results.

    The generator is expected never to raise (generate_drink doesn't), but a
    crash is still turned into ERROR_FALLBACK_RESULT so the session always
    reaches DISPLAYING.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        generator: DrinkGenerator = generate_drink,
        questions: tuple[Question, ...] = QUIZ_QUESTIONS,
    ):
        self.api_key = api_key
        self._generator = generator
        self._questions = questions
        self.state: AppState = INITIAL_STATE
        self.wizard: QuizWizard | None = None
        self._generation: asyncio.Task | None = None

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def result(self) -> DrinkResult | None:
        return self.state.result

    def _apply(self, event: Event) -> None:
        previous = self.state.phase
        self.state = transition(self.state, event)
        logger.debug(f"Session phase {previous.value} -> {self.state.phase.value}")

    def _require_wizard(self) -> QuizWizard:
        if self.state.phase != Phase.COLLECTING or self.wizard is None:
            raise QuizError(f"No quiz in progress (phase: {self.state.phase.value})")
        return self.wizard

    # -------------------------------------------------------------------------
    # Landing
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh quiz with no answers."""
        self._apply(Start())
        self.wizard = QuizWizard(self._questions)

    # -------------------------------------------------------------------------
    # Collecting
    # -------------------------------------------------------------------------

    def select_answer(self, question_id: str, value: str) -> None:
        self._require_wizard().select_answer(question_id, value)

    async def advance(self) -> Phase:
        """Next question, or hand the answers off for generation after the last one."""
        answers = self._require_wizard().advance()
        if answers is not None:
            self._begin_generation(answers)
        return self.state.phase

    async def choose(self, value: str) -> Phase:
        """Select an option and move on immediately (auto-advance)."""
        answers = self._require_wizard().choose(value)
        if answers is not None:
            self._begin_generation(answers)
        return self.state.phase

    def retreat(self) -> Phase:
        """Previous question, or back to landing from the first one."""
        if self._require_wizard().retreat():
            self._apply(ExitQuiz())
            self.wizard = None
        return self.state.phase

    # -------------------------------------------------------------------------
    # Generating
    # -------------------------------------------------------------------------

    def _begin_generation(self, answers: QuizAnswers) -> None:
        self._apply(Complete(answers=answers))
        self.wizard = None
        self._generation = asyncio.get_running_loop().create_task(
            self._generate(self.state.answers)
        )

    async def _generate(self, answers: Mapping[str, str]) -> DrinkResult:
        try:
            result = await self._generator(answers, self.api_key)
        except Exception:
            logger.exception("Drink generation crashed, using fallback drink")
            result = ERROR_FALLBACK_RESULT

        self._apply(Resolved(result=result))
        return result

    async def wait_for_result(self) -> DrinkResult | None:
        """Wait for the outstanding generation, if any, and return the result."""
        if self._generation is not None:
            await self._generation
        return self.state.result

    # -------------------------------------------------------------------------
    # Displaying
    # -------------------------------------------------------------------------

    def restart(self) -> None:
        """Throw away answers and result and go back to landing."""
        self._apply(Restart())
        self.wizard = None
        self._generation = None

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def snapshot(self) -> dict:
        """Everything a UI needs to render the current phase."""
        data = {
            "phase": self.state.phase.value,
            "question": None,
            "question_number": None,
            "total_questions": len(self._questions),
            "progress": None,
            "current_answer": None,
            "can_advance": False,
            "is_last": False,
            "direction": None,
            "result": self.state.result.to_dict() if self.state.result else None,
        }

        if self.wizard is not None and self.state.phase == Phase.COLLECTING:
            wizard = self.wizard
            data.update(
                question=wizard.current_question.model_dump(),
                question_number=wizard.question_number,
                progress=round(wizard.progress * 100),
                current_answer=wizard.current_answer,
                can_advance=wizard.can_advance,
                is_last=wizard.is_last,
                direction=wizard.direction,
            )

        return data
