"""Exception hierarchy for the RPG Adventure game.

Every error raised by the game derives from RpgAdventureError, so the
menu boundary and the process entry point can catch one type while
the context (which combatant, which save slot) travels in ``details``.

Navigation between menus is never expressed with exceptions; see
``rpg_adventure.ui.menu.NavigationSignal``.

Example:
    >>> from rpg_adventure.core.exceptions import InventoryError
    >>> raise InventoryError("Cannot add item", item_name="Club")
"""

from __future__ import annotations

from typing import Any


def _merge_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Combine explicit details with keyword context, skipping unset keys."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class RpgAdventureError(Exception):
    """Base exception for all RPG Adventure errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context, rendered after the message.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} [{detail_str}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(RpgAdventureError):
    """A character, monster, inventory or combat rule was broken."""


class InvalidGameStateError(GameEngineError):
    """The game manager was driven into a state it does not support."""

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_context(details, current_state=current_state))


class CombatError(GameEngineError):
    """An attack was requested that cannot happen.

    Raised, for example, when a dead character or monster is asked to
    attack or to be attacked.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant: str | None = None,
        round_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_context(details, combatant=combatant, round_number=round_number),
        )


class InventoryError(GameEngineError):
    """An inventory operation received an impossible request."""

    def __init__(
        self,
        message: str,
        *,
        item_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_context(details, item_name=item_name))


# =============================================================================
# Persistence Exceptions
# =============================================================================


class PersistenceError(RpgAdventureError):
    """The save database cannot be opened.

    Failed reads and writes of single slots are reported as failure
    results by the save store instead.
    """

    def __init__(
        self,
        message: str,
        *,
        save_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_context(details, save_name=save_name))


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(RpgAdventureError):
    """Settings could not be loaded from the environment or .env file."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_context(details, config_key=config_key))


class ValidationError(RpgAdventureError):
    """Programmatic input broke a model constraint.

    Player input never raises this; interactive validation reports
    failures as results carrying a message.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_context(details, field_name=field_name, invalid_value=invalid_value),
        )


# =============================================================================
# UI Exceptions
# =============================================================================


class UIError(RpgAdventureError):
    """Base exception for console UI errors."""


class InputClosedError(UIError):
    """The input stream reached end of file."""


__all__ = [
    "RpgAdventureError",
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "InventoryError",
    "PersistenceError",
    "ConfigurationError",
    "ValidationError",
    "UIError",
    "InputClosedError",
]
