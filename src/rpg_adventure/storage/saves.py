"""SQLite save games.

Each save slot is one row holding the character's JSON. Slot names are
sanitized before they touch the database; storage errors are logged
and reported as a failed save or load instead of being raised.

Default location: saves/rpg_adventure.db (see StorageSettings).
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generator, Protocol

from pydantic import ValidationError as PydanticValidationError

from rpg_adventure.core.exceptions import PersistenceError
from rpg_adventure.core.logging import get_logger
from rpg_adventure.core.validation import sanitize_filename
from rpg_adventure.models.factories import character_from_json, character_to_json


if TYPE_CHECKING:
    from rpg_adventure.engine.dice import DiceRoller
    from rpg_adventure.models.character import Character

logger = get_logger(__name__)


# =============================================================================
# Repository Protocol
# =============================================================================


class CharacterRepository(Protocol):
    """Anything that can store and restore characters by slot name."""

    def save(self, character: Character, name: str) -> bool: ...

    def load(self, name: str) -> Character | None: ...

    def list_saves(self) -> list[str]: ...


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class SaveRecord:
    """A stored save slot.

    Attributes:
        name: Sanitized slot name.
        character_class: Class tag of the saved character.
        character_json: Serialized character.
        created_at: When the slot was first written.
        updated_at: When the slot was last written.
    """

    name: str
    character_class: str
    character_json: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> SaveRecord:
        return cls(
            name=row[0],
            character_class=row[1],
            character_json=row[2],
            created_at=datetime.fromisoformat(row[3]),
            updated_at=datetime.fromisoformat(row[4]),
        )


# =============================================================================
# Save Store
# =============================================================================


class SaveStore:
    """SQLite-backed CharacterRepository.

    Args:
        db_path: Database file. Its directory is created if missing.
        dice: Random source given to loaded characters.

    Raises:
        PersistenceError: If the database cannot be opened.
    """

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path, *, dice: DiceRoller | None = None) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._dice = dice
        try:
            self._init_schema()
        except sqlite3.Error as exc:
            raise PersistenceError(
                f"Cannot open save database: {exc}",
                details={"path": str(self.db_path)},
            ) from exc
        logger.info("Save store initialized", path=str(self.db_path))

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(str(self.db_path))
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS saves (
                    name TEXT PRIMARY KEY,
                    character_class TEXT NOT NULL,
                    character_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (self.SCHEMA_VERSION,),
            )

    # =========================================================================
    # Save Operations
    # =========================================================================

    def save(self, character: Character, name: str) -> bool:
        """Write a character to a slot, replacing any previous save there.

        Returns:
            False if the slot name is invalid or the write failed.
        """
        slot = sanitize_filename(name)
        if not slot:
            logger.warning("Save refused, invalid slot name", raw=name)
            return False

        now = datetime.now().isoformat()
        try:
            with self._get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO saves (name, character_class, character_json, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(name) DO UPDATE SET
                        character_class = excluded.character_class,
                        character_json = excluded.character_json,
                        updated_at = excluded.updated_at
                    """,
                    (slot, str(character.character_class), character_to_json(character), now, now),
                )
        except sqlite3.Error:
            logger.exception("Failed to save character", slot=slot, character=character.name)
            return False

        logger.info("Character saved", slot=slot, character=character.name)
        return True

    def get_record(self, name: str) -> SaveRecord | None:
        """Fetch the raw slot row, or None if absent or unreadable."""
        slot = sanitize_filename(name)
        if not slot:
            return None
        try:
            with self._get_connection() as conn:
                row = conn.execute(
                    """
                    SELECT name, character_class, character_json, created_at, updated_at
                    FROM saves WHERE name = ?
                    """,
                    (slot,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to read save slot", slot=slot)
            return None
        return SaveRecord.from_row(tuple(row)) if row else None

    def load(self, name: str) -> Character | None:
        """Restore the character saved in a slot.

        Returns:
            The character, or None if the slot is missing or corrupt.
        """
        record = self.get_record(name)
        if record is None:
            logger.info("Save slot not found", slot=name)
            return None
        try:
            character = character_from_json(record.character_json, dice=self._dice)
        except PydanticValidationError:
            logger.exception("Corrupt save slot", slot=record.name)
            return None
        logger.info("Character loaded", slot=record.name, character=character.name)
        return character

    def list_saves(self) -> list[str]:
        """Slot names in alphabetical order."""
        try:
            with self._get_connection() as conn:
                rows = conn.execute("SELECT name FROM saves ORDER BY name").fetchall()
        except sqlite3.Error:
            logger.exception("Failed to list save slots")
            return []
        return [row[0] for row in rows]

    def delete(self, name: str) -> bool:
        """Remove a slot. Returns False if nothing was deleted."""
        slot = sanitize_filename(name)
        if not slot:
            return False
        try:
            with self._get_connection() as conn:
                deleted = conn.execute("DELETE FROM saves WHERE name = ?", (slot,)).rowcount > 0
        except sqlite3.Error:
            logger.exception("Failed to delete save slot", slot=slot)
            return False
        if deleted:
            logger.info("Save slot deleted", slot=slot)
        return deleted


__all__ = [
    "CharacterRepository",
    "SaveRecord",
    "SaveStore",
]
