"""
Library settings using pydantic-settings.

Environment variables are prefixed with FHIR_R5_. None is required: every
setting has a default, and keyword arguments of the parse functions
override the configured values per call.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fhir_r5.constants import DEFAULT_MAX_DOCUMENT_BYTES


class Settings(BaseSettings):
    """Codec settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FHIR_R5_",
        extra="ignore",
    )

    # Parsing
    strict: bool = False  # Reject unknown fields instead of keeping them
    max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("max_document_bytes")
    @classmethod
    def validate_max_document_bytes(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("FHIR_R5_MAX_DOCUMENT_BYTES must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
