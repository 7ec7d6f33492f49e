"""
Drink Recommendation Pipeline.

Two dependent remote steps:
1. recommend - chat completion names a real drink, explains the pick and
   writes a scene prompt for the image
2. illustrate - DALL-E renders that scene

Failure policy:
- No API key: demo mode, DEMO_RESULT, no network calls
- recommend fails (network, non-2xx, malformed JSON): DEMO_RESULT
- illustrate fails: keep the text, use the placeholder image

generate_drink() never raises. The user always gets a drink.
"""

import logging
from collections.abc import Mapping

from drinkmatch.llm.client import call_llm, generate_image
from drinkmatch.recommend.models import (
    DEMO_RESULT,
    PLACEHOLDER_IMAGE_URL,
    DrinkRecommendation,
    DrinkResult,
)
from drinkmatch.recommend.prompts import (
    SYSTEM_PROMPT,
    build_recommendation_prompt,
    default_image_prompt,
)

logger = logging.getLogger(__name__)


async def recommend_drink(answers: Mapping[str, str], api_key: str) -> DrinkRecommendation:
    """Step 1: ask the text model for a drink. Raises on any failure."""
    return await call_llm(
        response_model=DrinkRecommendation,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=build_recommendation_prompt(answers),
        api_key=api_key,
        step="recommend",
        answers=answers,
    )


async def illustrate_drink(recommendation: DrinkRecommendation, api_key: str) -> str:
    """Step 2: render the drink. Returns the placeholder image on any failure."""
    prompt = recommendation.image_prompt or default_image_prompt(recommendation.drink_name)
    try:
        return await generate_image(prompt=prompt, api_key=api_key, step="illustrate")
    except Exception as e:
        logger.warning(f"Image generation failed, using placeholder: {e}")
        return PLACEHOLDER_IMAGE_URL


async def generate_drink(answers: Mapping[str, str], api_key: str | None) -> DrinkResult:
    """
    Turn a finished quiz into a drink recommendation.

    Args:
        answers: Question id -> selected value (copied, never mutated)
        api_key: OpenAI API key; empty or None means demo mode

    Returns:
        A DrinkResult, always
    """
    if not api_key:
        logger.info("No OpenAI API key configured, returning demo drink")
        return DEMO_RESULT

    answers = dict(answers)

    try:
        recommendation = await recommend_drink(answers, api_key)
    except Exception as e:
        logger.error(f"Drink recommendation failed, returning fallback drink: {e}")
        return DEMO_RESULT

    image_url = await illustrate_drink(recommendation, api_key)

    logger.info(f"Recommended drink: {recommendation.drink_name}")
    return DrinkResult(
        drink_name=recommendation.drink_name,
        description=recommendation.description,
        image_url=image_url,
    )
