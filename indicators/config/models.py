"""Config models.

Settings for the command-line verifier. The decoder and validator take no
configuration; everything they need is passed as arguments.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
        Read from ``INDICATORS_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="INDICATORS_")

    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
