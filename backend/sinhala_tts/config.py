"""
config.py - Application Configuration

This module defines all configuration settings for the service.
Settings are loaded from environment variables or .env file.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

# Calculate .env path at module level (project root / .env)
_ENV_FILE_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    """
    Application settings.

    All settings can be overridden by environment variables.
    For example, set TRANSLITERATION_MODE=literal in .env file.
    """

    # Application Info
    APP_NAME: str = "Sinhala Phonetic TTS"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Transliteration
    # "longest" resolves multi-codepoint clusters (ක්, ක්‍ර, ...)
    # "literal" looks up one codepoint at a time like the old deployment
    TRANSLITERATION_MODE: Literal["longest", "literal"] = "longest"
    MAPPING_PATH: Optional[str] = None  # None = bundled table
    PROSODY_PITCH: str = "0.5st"

    # Speech provider
    # TTS_PROVIDER options: "google" (client library), "rest" (API key)
    TTS_PROVIDER: Literal["google", "rest"] = "google"
    GOOGLE_TTS_API_KEY: str | None = None
    SYNTHESIS_TIMEOUT: float | None = None
    SYNTHESIS_MAX_ATTEMPTS: int = 1

    # Output artifacts
    OUTPUT_DIR: str = "output"
    KEEP_AUDIO_FILES: bool = False

    class Config:
        """Configuration for settings loading."""
        env_file = str(_ENV_FILE_PATH)
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings instance
    """
    print("[config] Loading settings")
    settings = Settings()
    print("[config] App name:", settings.APP_NAME)
    print("[config] Version:", settings.VERSION)
    print("[config] Transliteration mode:", settings.TRANSLITERATION_MODE)
    print("[config] TTS provider:", settings.TTS_PROVIDER)
    return settings
