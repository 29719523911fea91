"""Library configuration using Pydantic Settings.

Environment variables can override default values.
Use .env file for local development.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Environment variables should be prefixed with BIGDECIMALS_
    Example: BIGDECIMALS_INTERN_WARN_SIZE=50000
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BIGDECIMALS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="text",
        description="Log format (json or text)",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path (always written as JSON)",
    )

    # Interning configuration
    intern_warn_size: int = Field(
        default=10_000,
        ge=0,
        description="Warn once when an interner grows past this many entries (0 disables)",
    )
    atomic_string_intern: bool = Field(
        default=False,
        description="Use insert-if-absent for string interning as well",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        log_format = v.lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}")
        return log_format


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton. Call ``get_settings.cache_clear()`` to reload."""
    return Settings()
