"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Match length is clamped to the board here, before any engine is built.
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


MAX_BOARD_SIZE = 32

WinCheck = Literal["last_move", "full_scan"]


def clamp_match_length(width: int, height: int, match_length: int) -> int:
    """Clamp ``match_length`` to ``[1, min(width, height)]``."""
    return max(1, min(match_length, width, height))


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board and rules configuration."""

    model_config = SettingsConfigDict(env_prefix="CONNECT4_")

    width: int = Field(default=7, ge=1, le=MAX_BOARD_SIZE)
    height: int = Field(default=6, ge=1, le=MAX_BOARD_SIZE)
    match_length: int = Field(
        default=4,
        description="Tokens in a row needed to win (clamped to the board)",
    )
    win_check: WinCheck = Field(
        default="last_move",
        description="Scan only through the last token, or the whole board",
    )

    @model_validator(mode="after")
    def _clamp_match_length(self) -> "GameSettings":
        self.match_length = clamp_match_length(self.width, self.height, self.match_length)
        return self


class UISettings(BaseSettings):
    """Terminal front end configuration."""

    model_config = SettingsConfigDict(env_prefix="CONNECT4_UI_")

    symbols: Literal["emoji", "ascii"] = "emoji"
    log_level: str = "WARNING"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    ui: UISettings = Field(default_factory=UISettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
