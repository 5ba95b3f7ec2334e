"""Application configuration management.

Loads settings from environment with validation.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with environment variable support (prefix ``OTGEN_``)."""

    model_config = SettingsConfigDict(
        env_prefix="otgen_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Linguistic system used when none is named explicitly
    default_system: str = "sl"

    # Development
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
