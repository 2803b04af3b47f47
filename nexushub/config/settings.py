"""
Application settings.

Uses Pydantic BaseSettings for type-safe config.
All values loaded from .env. No hardcoded secrets.
Follows 12-Factor App principles.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Sections:
    - App
    - Redis (snapshot persistence)
    - Gemini (tool suggestions)
    - CORS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──────────────────────────────────────────────────────────────
    APP_NAME: str = "NexusHub"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", description="development | staging | production")
    LOG_LEVEL: str = "INFO"

    # ── Redis ────────────────────────────────────────────────────────────
    REDIS_URL: str = Field(
        default="redis://localhost:6379",
        description="Redis connection URL"
    )
    SNAPSHOT_KEY_PREFIX: str = Field(
        default="nexushub",
        description="Prefix for the users/tools/departments snapshot keys"
    )

    # ── Gemini ───────────────────────────────────────────────────────────
    GEMINI_API_KEY: str = Field(
        default="",
        description="Google Gemini API key. Empty disables tool suggestions."
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"
    SUGGESTION_RATE_LIMIT: str = "10/minute"

    # ── CORS ─────────────────────────────────────────────────────────────
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

# Singleton, import this everywhere
settings = Settings()
