from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import logging

# Set up logging
logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BuilderSettings(BaseSettings):
    """Builder settings from environment (FFMPEG_STAGES_* or .env)."""
    # Invocation token placed first in every built command
    ffmpeg_binary: str = "ffmpeg"
    # Level applied by configure_logging(): DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FFMPEG_STAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("ffmpeg_binary")
    @classmethod
    def binary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ffmpeg_binary must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level


# In-memory cache of settings
_cached_settings: BuilderSettings | None = None


def load_settings() -> BuilderSettings:
    """Load settings from the environment, once."""
    global _cached_settings

    if _cached_settings is not None:
        return _cached_settings

    _cached_settings = BuilderSettings()
    logger.debug(f"Loaded settings: binary={_cached_settings.ffmpeg_binary}, "
                 f"log_level={_cached_settings.log_level}")
    return _cached_settings


def clear_settings_cache() -> None:
    """Clear the cached settings (forces reload)."""
    global _cached_settings
    _cached_settings = None
    logger.debug("Settings cache cleared")


def get_settings() -> BuilderSettings:
    """Get the current builder settings."""
    return load_settings()
