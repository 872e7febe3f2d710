"""
Centralized application settings using Pydantic Settings.

This module exposes a single `settings` instance that other modules can import.
Values come from the environment and from an optional `.env` file.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Gemini / Model
    GEMINI_API_KEY: Optional[str] = Field(default=None)
    GEMINI_MODEL: str = "flash"
    GENAI_REQUEST_TIMEOUT_SECS: int = 30
    GENAI_MAX_RETRIES: int = 2
    MAX_INPUT_CHARS: int = 8000

    # ElevenLabs / Audio
    ELEVENLABS_API_KEY: Optional[str] = Field(default=None)
    ELEVENLABS_VOICE_ID: str = "21m00Tcm4TlvDq8ikWAM"
    ELEVENLABS_MODEL_ID: str = "eleven_monolingual_v1"
    TTS_MAX_CHARS: int = 5000

    # Uploads
    MAX_FILE_SIZE: int = 10 * 1024 * 1024       # 10MB
    MAX_OCR_FILE_SIZE: int = 5 * 1024 * 1024    # 5MB
    MIN_TEXT_LENGTH: int = 50

    # Server
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()] or ["*"]


settings = Settings()
