"""Input validation for everything the player types.

Raw text never reaches the combat or inventory logic: menus, the
character creation flow and the save store pass input through these
functions first. Validation failures are ordinary results carrying a
user-facing message, not exceptions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from rpg_adventure.core.constants import (
    MAX_NAME_LENGTH,
    MAX_SAVE_NAME_LENGTH,
    MIN_NAME_LENGTH,
)
from rpg_adventure.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_\-]")
_YES_ANSWERS = frozenset({"y", "yes"})


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating one piece of player input.

    Attributes:
        value: The cleaned value, or None when validation failed.
        error: User-facing message explaining the failure.
    """

    value: T | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None


def sanitize_input(text: str | None) -> str:
    """Trim surrounding whitespace; None becomes the empty string."""
    if text is None:
        return ""
    return text.strip()


def validate_menu_choice(
    text: str | None,
    max_option: int,
    *,
    allow_zero: bool = True,
) -> ValidationResult[int]:
    """Validate a numeric menu selection.

    Args:
        text: Raw line typed by the player.
        max_option: Highest valid option number.
        allow_zero: Whether option 0 (back/exit) is accepted.

    Returns:
        ValidationResult holding the chosen option.
    """
    cleaned = sanitize_input(text)
    if not cleaned:
        return ValidationResult(None, "Please enter a number!")

    try:
        choice = int(cleaned)
    except ValueError:
        logger.debug("Menu choice is not a number", raw=cleaned)
        return ValidationResult(None, "That's not a number!")

    low = 0 if allow_zero else 1
    if choice < low or choice > max_option:
        logger.debug("Menu choice out of range", choice=choice, max_option=max_option)
        return ValidationResult(None, f"Choose between {low} and {max_option}!")

    return ValidationResult(choice)


def validate_character_name(text: str | None) -> ValidationResult[str]:
    """Validate a character name (2 to 20 characters after trimming)."""
    name = sanitize_input(text)
    if not name:
        return ValidationResult(None, "Name cannot be empty!")
    if len(name) < MIN_NAME_LENGTH:
        return ValidationResult(None, "Name too short!")
    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(None, "Name too long!")
    return ValidationResult(name)


def sanitize_filename(text: str | None) -> str:
    """Turn player input into a safe save slot name.

    Characters outside ``[A-Za-z0-9_-]`` are replaced with underscores.
    Over-long names and anything that looks like path traversal yield
    the empty string, which callers treat as invalid.

    Args:
        text: Raw save name.

    Returns:
        The sanitized name, or "" if the name cannot be made safe.
    """
    if text is None:
        return ""
    name = text.strip()
    if not name or len(name) > MAX_SAVE_NAME_LENGTH:
        return ""
    if ".." in name or name.startswith((".", "/", "\\")):
        logger.warning("Rejected unsafe save name", raw=name)
        return ""
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def validate_save_name(text: str | None) -> ValidationResult[str]:
    """Validate a save slot name typed by the player."""
    cleaned = sanitize_input(text)
    if not cleaned:
        return ValidationResult(None, "Save name cannot be empty!")
    if len(cleaned) > MAX_SAVE_NAME_LENGTH:
        return ValidationResult(None, "Save name too long!")
    safe = sanitize_filename(cleaned)
    if not safe:
        return ValidationResult(None, "Invalid save name!")
    return ValidationResult(safe)


def validate_yes_no(text: str | None) -> bool:
    """Interpret a yes/no answer; anything but y/yes is a no."""
    return sanitize_input(text).lower() in _YES_ANSWERS


__all__ = [
    "ValidationResult",
    "sanitize_input",
    "validate_menu_choice",
    "validate_character_name",
    "sanitize_filename",
    "validate_save_name",
    "validate_yes_no",
]
