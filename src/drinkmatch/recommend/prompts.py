"""
Prompts for the recommend and illustrate steps.
"""

from collections.abc import Mapping

SYSTEM_PROMPT = (
    "You are a knowledgeable sommelier and bartender. Always respond with valid JSON. "
    "IMPORTANT: Only recommend REAL drinks that actually exist - no silly or made-up beverages."
)

# (answer key, label in the prompt)
ANSWER_FIELDS: tuple[tuple[str, str], ...] = (
    ("age_group", "Age Group"),
    ("gender", "Gender"),
    ("region", "Region"),
    ("setting", "Setting"),
    ("time_of_day", "Time of Day"),
    ("budget", "Budget"),
    ("allergies", "Allergies"),
)

NOT_SPECIFIED = "Not specified"


def person_noun(gender: str | None) -> str:
    if gender == "male":
        return "man"
    if gender == "female":
        return "woman"
    return "person"


def build_recommendation_prompt(answers: Mapping[str, str]) -> str:
    """Build the user prompt for the recommend step from the quiz answers."""
    details = "\n".join(
        f"{label}: {answers.get(key) or NOT_SPECIFIED}" for key, label in ANSWER_FIELDS
    )
    person = person_noun(answers.get("gender"))
    age = (answers.get("age_group") or "adult").lower()
    setting = (answers.get("setting") or "relaxed").lower()

    return f"""You are an expert bartender and beverage sommelier. Based on these details about a person, recommend a REAL, ACTUAL beverage that exists and is commonly available. Choose from popular drinks like cocktails, coffee drinks, teas, smoothies, juices, sodas, wines, beers, and other established beverages. Do NOT make up nonsensical or silly drinks - recommend real beverages that actually exist.

{details}

Respond in JSON format with:
- "drinkName": The name of a REAL beverage that exists and is commonly available
- "description": A 2-3 sentence explanation of why this real drink is the perfect match for their personality, preferences, and situation
- "dallePrompt": A detailed, realistic photo prompt for DALL-E showing a {person} in their {age} years enjoying the drink in a {setting} setting. Include the specific drink details and make it appetizing and realistic."""


def default_image_prompt(drink_name: str) -> str:
    """Image prompt used when the recommend step didn't supply one."""
    return (
        f'Pixar-style 3D cartoon of a person holding a colorful drink called "{drink_name}" '
        "in a fun, vibrant setting"
    )
