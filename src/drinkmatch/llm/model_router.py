"""
drinkmatch - Model Router.

Picks the OpenAI model and call parameters for each pipeline step.

Steps:
- recommend: chat completion that names the drink (gpt-4o, JSON output)
- illustrate: image generation of someone enjoying it (dall-e-3, square)

Model names and image size come from settings so they can be swapped
without code changes.
"""

from typing import Literal, TypedDict

from drinkmatch.config import get_settings


class StepConfig(TypedDict, total=False):
    """Configuration for one pipeline step."""

    model: str
    temperature: float
    size: str  # image steps only, e.g. "1024x1024"
    n: int  # images per request


Step = Literal["recommend", "illustrate"]


def get_step_config(step: Step | str) -> StepConfig:
    """
    Get the model configuration for a pipeline step.

    Args:
        step: "recommend" or "illustrate"

    Returns:
        A fresh config dict the caller may mutate
    """
    settings = get_settings()

    if step == "illustrate":
        return {
            "model": settings.drinkmatch_image_model,
            "size": settings.drinkmatch_image_size,
            "n": 1,  # exactly one image per drink
        }

    return {
        "model": settings.drinkmatch_text_model,
        "temperature": settings.drinkmatch_text_temperature,
    }
