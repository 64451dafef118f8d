"""
Application configuration using Pydantic Settings.

Timeline behaviour toggles live here so callers never pass ambient state
into the transform engine directly.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ===========================================
    # Timeline engine
    # ===========================================
    # Check that the baseline is time-ordered and non-overlapping before
    # running a cascade. Turn off only for trusted, pre-validated input.
    TIMELINE_VALIDATE_BASELINE: bool = True

    # ===========================================
    # Timeline API
    # ===========================================
    # Clamp the dragged block into the visible day before previewing.
    # The engine itself never clamps.
    TIMELINE_CLAMP_CURSOR_TO_DAY: bool = False
    DAY_START_MINUTES: int = Field(0, ge=0)
    DAY_END_MINUTES: int = Field(24 * 60, gt=0)

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
