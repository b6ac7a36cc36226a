"""Enumeration types for the RPG Adventure game.

These enums are the closed sets the rest of the model is keyed on:
item categories (which double as equip slots), character classes,
monster kinds and attack kinds.
"""

from __future__ import annotations

from enum import StrEnum


class ItemCategory(StrEnum):
    """Item categories.

    Weapon and armor are equippable and each owns one equip slot.
    Declaration order is the order used when sorting by category.
    """

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"
    MISC = "misc"

    @property
    def display_name(self) -> str:
        """Human-readable name (e.g. 'Weapon', 'Miscellaneous')."""
        if self is ItemCategory.MISC:
            return "Miscellaneous"
        return self.value.capitalize()

    @property
    def plural_name(self) -> str:
        """Heading used when listing items of this category."""
        if self in (ItemCategory.WEAPON, ItemCategory.POTION):
            return f"{self.display_name}s"
        return self.display_name

    @property
    def is_equippable(self) -> bool:
        return self in (ItemCategory.WEAPON, ItemCategory.ARMOR)

    @property
    def order(self) -> int:
        """Position of the category in declaration order."""
        return list(ItemCategory).index(self)


class CharacterClass(StrEnum):
    """Playable character classes."""

    WARRIOR = "warrior"
    """Strong fighter with high health."""

    MAGE = "mage"
    """Magic user with spells."""

    @property
    def description(self) -> str:
        descriptions = {
            CharacterClass.WARRIOR: "Strong fighter with high health",
            CharacterClass.MAGE: "Magic user with spells",
        }
        return descriptions[self]


class MonsterKind(StrEnum):
    """Monster kinds a dungeon can spawn."""

    GOBLIN = "goblin"
    TROLL = "troll"


class AttackKind(StrEnum):
    """How a character attack was carried out."""

    WEAPON = "weapon"
    """Warrior weapon strike."""

    SPELL = "spell"
    """Mage spell, paid for with mana."""

    STAFF = "staff"
    """Mage staff strike when mana is too low for a spell."""

    EXHAUSTED = "exhausted"
    """Not enough stamina; no damage and nothing spent."""


__all__ = [
    "ItemCategory",
    "CharacterClass",
    "MonsterKind",
    "AttackKind",
]
