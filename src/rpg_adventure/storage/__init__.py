"""Storage module for RPG Adventure save games.

Provides SQLite-based storage for saved characters.
"""

from rpg_adventure.storage.saves import (
    CharacterRepository,
    SaveRecord,
    SaveStore,
)

__all__ = [
    "CharacterRepository",
    "SaveRecord",
    "SaveStore",
]
