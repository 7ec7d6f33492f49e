"""
drinkmatch Flow.

Phase state machine (pure) and the session controller that drives it.
"""

from .session import DrinkSession
from .state import AppState, InvalidTransition, Phase, transition

__all__ = [
    "AppState",
    "DrinkSession",
    "InvalidTransition",
    "Phase",
    "transition",
]
