"""
drinkmatch Recommendations.

Quiz answers in, DrinkResult out. See orchestrator.py for the failure policy.
"""

from .models import (
    DEMO_RESULT,
    ERROR_FALLBACK_RESULT,
    PLACEHOLDER_IMAGE_URL,
    DrinkRecommendation,
    DrinkResult,
)
from .orchestrator import generate_drink

__all__ = [
    "DEMO_RESULT",
    "ERROR_FALLBACK_RESULT",
    "PLACEHOLDER_IMAGE_URL",
    "DrinkRecommendation",
    "DrinkResult",
    "generate_drink",
]
