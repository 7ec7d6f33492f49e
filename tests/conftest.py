"""
Pytest configuration and fixtures for drinkmatch tests.
"""

import os

import pytest

# Set test environment before importing drinkmatch modules
os.environ["DRINKMATCH_ENV"] = "development"
os.environ.pop("OPENAI_API_KEY", None)

from drinkmatch.config import get_settings
from drinkmatch.recommend.models import DrinkResult


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """No API key unless a test sets one; settings re-read per test."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def complete_answers() -> dict[str, str]:
    """A full answer set for the default question list."""
    return {
        "age_group": "30s",
        "gender": "female",
        "region": "Europe",
        "setting": "Beach",
        "time_of_day": "Afternoon",
        "budget": "Moderate",
        "allergies": "Nuts",
    }


@pytest.fixture
def sample_result() -> DrinkResult:
    return DrinkResult(
        drink_name="Aperol Spritz",
        description="Bright, bitter-sweet and built for a sunny afternoon by the sea.",
        image_url="https://images.example.com/spritz.png",
    )
