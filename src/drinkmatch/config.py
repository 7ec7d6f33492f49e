"""
drinkmatch - Configuration and settings.

Everything is read from the environment (or a local .env file).
OPENAI_API_KEY is optional: without it the app runs in demo mode and
always recommends the same fixed drink.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI (absent = demo mode)
    openai_api_key: str | None = None

    # Models
    drinkmatch_text_model: str = "gpt-4o"
    drinkmatch_text_temperature: float = 0.7
    drinkmatch_image_model: str = "dall-e-3"
    drinkmatch_image_size: str = "1024x1024"

    # Application
    drinkmatch_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Prompt logging
    # DRINKMATCH_LOG_PROMPTS=1 - log to local files (dev only)
    drinkmatch_log_prompts: bool = False

    @property
    def is_development(self) -> bool:
        return self.drinkmatch_env == "development"

    @property
    def is_production(self) -> bool:
        return self.drinkmatch_env == "production"

    @property
    def has_openai_key(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance."""
    return Settings()
