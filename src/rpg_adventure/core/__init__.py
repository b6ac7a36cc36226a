"""Core module providing configuration, logging, validation and exceptions.

Exports:
    Exceptions:
        RpgAdventureError: Base exception for all application errors.
        GameEngineError, CombatError, InventoryError: Model/engine errors.
        PersistenceError: Save store errors.
        ConfigurationError, ValidationError: Configuration and data errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from rpg_adventure.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from rpg_adventure.core.exceptions import (
    CombatError,
    ConfigurationError,
    GameEngineError,
    InputClosedError,
    InvalidGameStateError,
    InventoryError,
    PersistenceError,
    RpgAdventureError,
    UIError,
    ValidationError,
)
from rpg_adventure.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from rpg_adventure.core.validation import (
    ValidationResult,
    sanitize_filename,
    sanitize_input,
    validate_character_name,
    validate_menu_choice,
    validate_save_name,
    validate_yes_no,
)


__all__ = [
    # Base exception
    "RpgAdventureError",
    # Engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "InventoryError",
    # Persistence
    "PersistenceError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # UI exceptions
    "UIError",
    "InputClosedError",
    # Configuration
    "Settings",
    "GameSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Validation
    "ValidationResult",
    "sanitize_input",
    "sanitize_filename",
    "validate_menu_choice",
    "validate_character_name",
    "validate_save_name",
    "validate_yes_no",
]
