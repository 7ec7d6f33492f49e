"""
Recommendation models.

DrinkResult is what the results screen shows. DrinkRecommendation is the
JSON shape the text model must return.
"""

from dataclasses import asdict, dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class DrinkResult:
    """Final recommendation: produced once per finished quiz."""

    drink_name: str
    description: str
    image_url: str

    def to_dict(self) -> dict:
        return asdict(self)


class DrinkRecommendation(BaseModel):
    """Structured reply from the recommend step."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    drink_name: str = Field(
        alias="drinkName",
        min_length=1,
        description="The name of a REAL beverage that exists and is commonly available",
    )
    description: str = Field(
        min_length=1,
        description="2-3 sentences on why this drink matches the person and situation",
    )
    image_prompt: str | None = Field(
        default=None,
        alias="dallePrompt",
        description="Photorealistic scene of the person enjoying the drink",
    )


# =============================================================================
# Fixed results
# =============================================================================

PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1551024709-8f23befc6f87?w=400&h=400&fit=crop"

# No API key, or the recommend step failed
DEMO_RESULT = DrinkResult(
    drink_name="The Cosmic Sipper",
    description=(
        "Based on your unique vibe, we've concocted the perfect drink! This refreshing "
        "creation captures your essence with a blend of bold flavors and smooth finish."
    ),
    image_url=PLACEHOLDER_IMAGE_URL,
)

# Generation crashed outside the pipeline's own error handling
ERROR_FALLBACK_RESULT = DrinkResult(
    drink_name="The Mystery Mixer",
    description=(
        "A delightful surprise that matches your unique vibe! This drink combines "
        "unexpected flavors that somehow work perfectly together, just like you."
    ),
    image_url=PLACEHOLDER_IMAGE_URL,
)
