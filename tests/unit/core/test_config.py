"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from rpg_adventure.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from rpg_adventure.core.exceptions import ConfigurationError


class TestGameSettings:
    """Tests for GameSettings configuration."""

    def test_default_values(self, isolated_env: Path) -> None:
        """Test default game settings."""
        settings = GameSettings()

        assert settings.rng_seed is None
        assert settings.pause_after_action is True
        assert settings.max_combat_rounds == 500

    def test_env_override(self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test game settings read from the environment."""
        monkeypatch.setenv("RPG_ADVENTURE_GAME_RNG_SEED", "1234")
        monkeypatch.setenv("RPG_ADVENTURE_GAME_PAUSE_AFTER_ACTION", "false")

        settings = GameSettings()

        assert settings.rng_seed == 1234
        assert settings.pause_after_action is False

    def test_round_limit_must_be_positive(self, isolated_env: Path) -> None:
        """Test max_combat_rounds rejects zero."""
        with pytest.raises(ValueError):
            GameSettings(max_combat_rounds=0)


class TestStorageSettings:
    """Tests for StorageSettings configuration."""

    def test_default_path_parent_created(self, isolated_env: Path) -> None:
        """Test the default save directory is created."""
        settings = StorageSettings()

        assert settings.database_path == Path("saves/rpg_adventure.db")
        assert (isolated_env / "saves").is_dir()

    def test_custom_path(self, tmp_path: Path) -> None:
        """Test a custom database path."""
        custom = tmp_path / "nested" / "game.db"

        settings = StorageSettings(database_path=custom)

        assert settings.database_path == custom
        assert custom.parent.exists()


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, isolated_env: Path) -> None:
        """Test default settings initialization."""
        settings = Settings()

        assert settings.app_name == "RPG Adventure"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_debug_forces_debug_level(
        self,
        isolated_env: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test debug mode switches the effective log level."""
        monkeypatch.setenv("RPG_ADVENTURE_DEBUG", "true")

        settings = Settings()

        assert settings.debug is True
        assert settings.effective_log_level == "DEBUG"

    def test_effective_level_without_debug(
        self,
        isolated_env: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the configured level is used outside debug mode."""
        monkeypatch.setenv("RPG_ADVENTURE_LOG_LEVEL", "ERROR")

        assert Settings().effective_log_level == "ERROR"

    def test_nested_settings(self, isolated_env: Path) -> None:
        """Test nested settings are populated."""
        settings = Settings()

        assert isinstance(settings.game, GameSettings)
        assert isinstance(settings.storage, StorageSettings)


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_cached_instance(self, isolated_env: Path) -> None:
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear(self, isolated_env: Path) -> None:
        """Test clear_settings_cache forces a reload."""
        first = get_settings()
        clear_settings_cache()

        assert get_settings() is not first

    def test_invalid_config_raises(
        self,
        isolated_env: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test invalid configuration is wrapped in ConfigurationError."""
        monkeypatch.setenv("RPG_ADVENTURE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details
