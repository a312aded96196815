"""Centralized configuration.

All settings are read from environment variables (or a .env.boardlens
file). Every field has a default, so an empty environment is valid.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env.boardlens", env_file_encoding="utf-8",
    )

    # Per-move theme delta that marks a critical moment
    critical_threshold: float = 0.5

    # Turning points kept in a game review
    turning_point_limit: int = Field(default=10, ge=1)

    # CLI logging
    log_level: str = "WARNING"
