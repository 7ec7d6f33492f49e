"""
App State Machine.

Top-level phases of a drinkmatch session and the pure transition function
between them. No rendering, no I/O: (state, event) -> new state.

    LANDING --Start--> COLLECTING --Complete--> GENERATING --Resolved--> DISPLAYING
       ^                   |                                               |
       +-----ExitQuiz------+                                               |
       +------------------------------Restart------------------------------+
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from drinkmatch.recommend.models import DrinkResult


class Phase(Enum):
    """Session phases."""
    LANDING = "landing"          # Welcome screen
    COLLECTING = "collecting"    # Quiz in progress
    GENERATING = "generating"    # Waiting on the recommendation
    DISPLAYING = "displaying"    # Showing the drink


class InvalidTransition(Exception):
    """Event not allowed in the current phase."""

    def __init__(self, phase: Phase, event: "Event"):
        self.phase = phase
        self.event = event
        super().__init__(f"Cannot {type(event).__name__} while {phase.value}")


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class Start:
    """User starts the quiz from the landing screen."""


@dataclass(frozen=True)
class ExitQuiz:
    """User backed out of the first question."""


@dataclass(frozen=True)
class Complete:
    """Last question answered."""
    answers: Mapping[str, str]


@dataclass(frozen=True)
class Resolved:
    """Recommendation finished (always succeeds, possibly with a fallback)."""
    result: DrinkResult


@dataclass(frozen=True)
class Restart:
    """User asked to start over from the results screen."""


Event = Start | ExitQuiz | Complete | Resolved | Restart


# =============================================================================
# State
# =============================================================================

@dataclass(frozen=True)
class AppState:
    """
    Snapshot of a session.

    answers is set from GENERATING on, result only in DISPLAYING.
    """
    phase: Phase = Phase.LANDING
    answers: Mapping[str, str] | None = None
    result: DrinkResult | None = None

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "answers": dict(self.answers) if self.answers is not None else None,
            "result": self.result.to_dict() if self.result else None,
        }


INITIAL_STATE = AppState()


def transition(state: AppState, event: Event) -> AppState:
    """
    Apply an event to a state.

    Returns the new state. Raises InvalidTransition for events that make no
    sense in the current phase (e.g. starting a second quiz while the first
    one is still generating).
    """
    phase = state.phase

    if phase == Phase.LANDING:
        if isinstance(event, Start):
            return AppState(phase=Phase.COLLECTING)

    elif phase == Phase.COLLECTING:
        if isinstance(event, ExitQuiz):
            return AppState(phase=Phase.LANDING)
        if isinstance(event, Complete):
            # Copy in: the quiz hands over its answers and never touches them again
            answers = MappingProxyType(dict(event.answers))
            return AppState(phase=Phase.GENERATING, answers=answers)

    elif phase == Phase.GENERATING:
        if isinstance(event, Resolved):
            return AppState(phase=Phase.DISPLAYING, answers=state.answers, result=event.result)

    elif phase == Phase.DISPLAYING:
        if isinstance(event, Restart):
            return INITIAL_STATE

    raise InvalidTransition(phase, event)
