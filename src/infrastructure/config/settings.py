"""Application settings.

All runtime configuration is read here from environment variables or a
`.env` file. Other modules obtain values through `get_settings()`.
"""

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file(start: Path | None = None) -> Path | None:
    """Search upwards from `start` for a `.env` file.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Path to the first `.env` found, or None
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """Runtime configuration for award-intervals."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./award_intervals.db"
    repository_backend: Literal["database", "memory"] = "database"

    log_level: str = "INFO"
    json_logs: bool = False

    min_award_year: int = 1900
    max_award_year: int = Field(default_factory=lambda: date.today().year)

    max_upload_bytes: int = 5 * 1024 * 1024
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    @model_validator(mode="after")
    def _check_year_window(self) -> "Settings":
        if self.min_award_year > self.max_award_year:
            raise ValueError(
                f"MIN_AWARD_YEAR ({self.min_award_year}) must not exceed "
                f"MAX_AWARD_YEAR ({self.max_award_year})"
            )
        return self

    def get_database_url(self) -> str:
        """Return the configured database URL."""
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()
