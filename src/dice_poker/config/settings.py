"""
Dice Poker - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with DICE_POKER_ (e.g. DICE_POKER_SEED=42).
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    starting_currency: int = Field(default=10, ge=0)
    seed: int | None = None
    strict_actions: bool = False

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "DICE_POKER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
