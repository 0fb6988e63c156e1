"""Centralised backend configuration loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings — values are sourced from env vars or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Game state ───────────────────────────────────────────────────────
    storage_key: str = Field(
        default="meetingBingo_gameState",
        description="Key under which the game snapshot is persisted",
    )
    locale: str = "en-US"

    # ── Mistral API (speech) ─────────────────────────────────────────────
    mistral_api_key: str = Field(default="", description="Mistral La Plateforme API key")
    voxtral_model: str = "voxtral-mini-latest"
    voxtral_realtime_model: str = "voxtral-mini-transcribe-realtime-2602"
    audio_sample_rate: int = 16_000
    audio_chunk_ms: int = 480

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = Field(
        default=f"sqlite:///{_PROJECT_ROOT / 'data' / 'meeting_bingo.db'}",
        description="SQLite connection URL for the key-value store",
    )

    # ── Server ───────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"])
    debug: bool = False


settings = Settings()
