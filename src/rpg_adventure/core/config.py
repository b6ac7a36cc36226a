"""Configuration management for the RPG Adventure game.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides.

Example:
    >>> from rpg_adventure.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.app_name)
    'RPG Adventure'

Environment Variables:
    RPG_ADVENTURE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RPG_ADVENTURE_LOG_FILE: Write structured logs to this file instead of stderr
    RPG_ADVENTURE_GAME_RNG_SEED: Seed for reproducible combat and drops
    RPG_ADVENTURE_GAME_PAUSE_AFTER_ACTION: Wait for Enter after each menu action
    RPG_ADVENTURE_STORAGE_DATABASE_PATH: Path to the SQLite save database
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rpg_adventure.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for game engine behavior.

    Attributes:
        rng_seed: Seed for the shared random source. None means entropy.
        pause_after_action: Wait for Enter after each leaf menu action.
        max_combat_rounds: Upper bound on rounds in a single encounter.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_ADVENTURE_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rng_seed: int | None = Field(
        default=None,
        description="Seed for reproducible damage and drop rolls",
    )
    pause_after_action: bool = Field(
        default=True,
        description="Wait for Enter after each menu action",
    )
    max_combat_rounds: int = Field(
        default=500,
        ge=1,
        le=10_000,
        description="Maximum rounds before an encounter is abandoned",
    )


class StorageSettings(BaseSettings):
    """Configuration for save storage.

    Attributes:
        database_path: Path to the SQLite database holding save slots.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_ADVENTURE_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_path: Path = Field(
        default=Path("saves/rpg_adventure.db"),
        validate_default=True,
        description="Path to the SQLite save database",
    )

    @field_validator("database_path", mode="after")
    @classmethod
    def ensure_parent_exists(cls, value: Path) -> Path:
        """Ensure the save directory exists, creating it if necessary.

        Args:
            value: The database path to validate.

        Returns:
            The validated path.
        """
        value.parent.mkdir(parents=True, exist_ok=True)
        return value


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Render log events as JSON.
        log_file: Optional log file path.
        game: Game engine settings.
        storage: Save storage settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_ADVENTURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="RPG Adventure",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON",
    )
    log_file: str | None = Field(
        default=None,
        description="Write log events to this file instead of stderr",
    )

    game: GameSettings = Field(default_factory=GameSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode.

        Returns:
            "DEBUG" when debug mode is on, otherwise the configured level.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
