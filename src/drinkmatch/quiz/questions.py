"""
Quiz Questions - Static configuration.

The ordered list of questions the wizard walks through. Read-only: nothing
in the app adds, removes or edits questions at runtime.

The question ids double as the keys of the answer mapping and are the
fields the recommendation prompt expects (see recommend/prompts.py).
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Models
# =============================================================================

class QuizOption(BaseModel):
    """One selectable answer."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    icon: str | None = None


class Question(BaseModel):
    """A single quiz step."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str = Field(description="Prompt text shown to the user")
    options: tuple[QuizOption, ...]

    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


def _options(*specs: tuple[str, str, str]) -> tuple[QuizOption, ...]:
    return tuple(QuizOption(value=value, label=label, icon=icon) for value, label, icon in specs)


# =============================================================================
# Question Set
# =============================================================================

QUIZ_QUESTIONS: tuple[Question, ...] = (
    Question(
        id="age_group",
        question="How old are you?",
        options=_options(
            ("Teens", "Under 20", "🧃"),
            ("20s", "20s", "🎉"),
            ("30s", "30s", "💼"),
            ("40s", "40s", "🏡"),
            ("50s", "50s", "📚"),
            ("60s+", "60+", "🌅"),
        ),
    ),
    Question(
        id="gender",
        question="How do you identify?",
        options=_options(
            ("male", "Male", "👨"),
            ("female", "Female", "👩"),
            ("non-binary", "Non-binary", "🧑"),
            ("prefer-not-to-say", "Prefer not to say", "🤐"),
        ),
    ),
    Question(
        id="region",
        question="Where in the world are you?",
        options=_options(
            ("North America", "North America", "🗽"),
            ("South America", "South America", "🌎"),
            ("Europe", "Europe", "🏰"),
            ("Africa", "Africa", "🌍"),
            ("Asia", "Asia", "🏯"),
            ("Oceania", "Oceania", "🏝️"),
        ),
    ),
    Question(
        id="setting",
        question="Where are you drinking it?",
        options=_options(
            ("Home", "At home", "🛋️"),
            ("Bar", "At a bar", "🍸"),
            ("Beach", "At the beach", "🏖️"),
            ("Office", "At work", "🖥️"),
            ("Party", "At a party", "🥳"),
            ("Outdoors", "Outdoors", "🏕️"),
        ),
    ),
    Question(
        id="time_of_day",
        question="What time is it?",
        options=_options(
            ("Morning", "Morning", "🌅"),
            ("Afternoon", "Afternoon", "☀️"),
            ("Evening", "Evening", "🌆"),
            ("Late night", "Late night", "🌙"),
        ),
    ),
    Question(
        id="budget",
        question="What's your budget?",
        options=_options(
            ("Budget", "Keep it cheap", "🪙"),
            ("Moderate", "Middle of the road", "💵"),
            ("Premium", "Treat myself", "💎"),
        ),
    ),
    Question(
        id="allergies",
        question="Anything you need to avoid?",
        options=_options(
            ("None", "Nothing", "✅"),
            ("Dairy", "Dairy", "🥛"),
            ("Nuts", "Nuts", "🥜"),
            ("Gluten", "Gluten", "🌾"),
            ("Alcohol", "No alcohol", "🚫"),
            ("Caffeine", "No caffeine", "☕"),
        ),
    ),
)

QUESTION_IDS: tuple[str, ...] = tuple(q.id for q in QUIZ_QUESTIONS)
