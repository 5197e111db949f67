"""
Configuration - Environment-Driven Settings

Settings are read from environment variables, with a ``.env`` file in the
project root loaded first if present.

Variables:
    BIBLE_NAV_CORPUS        Default corpus path or URL (default: bible.json)
    BIBLE_NAV_LOG_LEVEL     Log level for the CLI (default: WARNING)
    BIBLE_NAV_HTTP_TIMEOUT  Seconds before a corpus download times out (default: 30)
    BIBLE_NAV_HTTP_RETRIES  Download attempts before giving up (default: 3)
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from bible_nav.exceptions import ConfigurationError

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


class Settings(BaseModel):
    """Runtime settings for loading and the CLI."""

    corpus: str = "bible.json"
    log_level: str = "WARNING"
    http_timeout: float = Field(default=30.0, gt=0)
    http_retries: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from BIBLE_NAV_* environment variables."""
        values = {
            "corpus": os.getenv("BIBLE_NAV_CORPUS"),
            "log_level": os.getenv("BIBLE_NAV_LOG_LEVEL"),
            "http_timeout": os.getenv("BIBLE_NAV_HTTP_TIMEOUT"),
            "http_retries": os.getenv("BIBLE_NAV_HTTP_RETRIES"),
        }
        try:
            return cls(**{k: v for k, v in values.items() if v})
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise ConfigurationError(f"Invalid BIBLE_NAV_* setting: {fields}") from e


# Global settings instance (lazily initialized)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the process-wide settings.

    Returns:
        The cached Settings instance.
    """
    global _settings

    if _settings is None:
        _settings = Settings.from_env()

    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
