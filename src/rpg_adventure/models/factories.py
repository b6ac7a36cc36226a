"""Factories for characters and monsters.

Both factories accept the variant key case-insensitively. Unknown
character classes are refused; unknown monster kinds fall back to the
Goblin.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from rpg_adventure.core.logging import get_logger
from rpg_adventure.core.validation import sanitize_input, validate_character_name
from rpg_adventure.engine.dice import DiceRoller
from rpg_adventure.models.character import AnyCharacter, Character, Mage, Warrior
from rpg_adventure.models.enums import CharacterClass, MonsterKind
from rpg_adventure.models.monster import Goblin, Monster, Troll


logger = get_logger(__name__)


CHARACTER_TYPES: dict[CharacterClass, type[Character]] = {
    CharacterClass.WARRIOR: Warrior,
    CharacterClass.MAGE: Mage,
}

MONSTER_TYPES: dict[MonsterKind, type[Monster]] = {
    MonsterKind.GOBLIN: Goblin,
    MonsterKind.TROLL: Troll,
}

_character_adapter: TypeAdapter[Character] = TypeAdapter(AnyCharacter)


def _with_dice(dice: DiceRoller | None) -> dict[str, DiceRoller]:
    return {"dice": dice} if dice is not None else {}


def create_character(
    kind: str | None,
    name: str | None,
    *,
    dice: DiceRoller | None = None,
) -> Character | None:
    """Create a new level 1 character.

    Args:
        kind: Class key such as ``"warrior"`` or ``"Mage"``.
        name: Character name, 2-20 characters after trimming.
        dice: Random source for the character's attacks.

    Returns:
        The character, or None for an invalid name or unknown class.
    """
    name_result = validate_character_name(name)
    if not name_result.ok:
        logger.warning("Character creation failed, invalid name", reason=name_result.error)
        return None

    key = sanitize_input(kind).lower()
    try:
        character_class = CharacterClass(key)
    except ValueError:
        logger.warning("Character creation failed, unknown class", kind=key)
        return None

    character = CHARACTER_TYPES[character_class](name=name_result.value, **_with_dice(dice))
    logger.info("Character created", character=character.name, character_class=character_class)
    return character


def create_monster(kind: str | None, *, dice: DiceRoller | None = None) -> Monster:
    """Create a fresh monster for one encounter.

    Unknown or missing kinds produce a Goblin.
    """
    key = sanitize_input(kind).lower()
    try:
        monster_kind = MonsterKind(key)
    except ValueError:
        logger.warning("Unknown monster type, creating default Goblin", kind=key)
        monster_kind = MonsterKind.GOBLIN

    monster = MONSTER_TYPES[monster_kind](**_with_dice(dice))
    logger.info("Monster created", kind=monster_kind, health=monster.health)
    return monster


def available_character_classes() -> list[str]:
    """Lines describing the selectable classes."""
    return [f"- {cls.value}: {cls.description}" for cls in CharacterClass]


def character_from_json(data: str | bytes, *, dice: DiceRoller | None = None) -> Character:
    """Rebuild a saved character, picking the class from its tag.

    Raises:
        pydantic.ValidationError: If the data is not a valid character.
    """
    character = _character_adapter.validate_json(data)
    if dice is not None:
        character.dice = dice
    return character


def character_to_json(character: Character) -> str:
    return character.model_dump_json()


__all__ = [
    "CHARACTER_TYPES",
    "MONSTER_TYPES",
    "create_character",
    "create_monster",
    "available_character_classes",
    "character_from_json",
    "character_to_json",
]
