"""Domain models for RPG Adventure.

Items, inventories, characters, monsters and dungeons are pydantic
models. Characters round-trip through JSON for save games; monsters
and dungeons are rebuilt for every encounter.
"""

from __future__ import annotations

from rpg_adventure.models.enums import (
    AttackKind,
    CharacterClass,
    ItemCategory,
    MonsterKind,
)
from rpg_adventure.models.item import Item
from rpg_adventure.models.inventory import (
    Inventory,
    InventorySortStrategy,
    SortByCategory,
    SortByName,
    SortByValue,
)
from rpg_adventure.models.character import (
    AnyCharacter,
    AttackOutcome,
    Character,
    Mage,
    Warrior,
)
from rpg_adventure.models.monster import AnyMonster, Goblin, Monster, Troll
from rpg_adventure.models.dungeon import DungeonBuilder, DungeonDescriptor, default_dungeons
from rpg_adventure.models.factories import (
    available_character_classes,
    character_from_json,
    character_to_json,
    create_character,
    create_monster,
)


__all__ = [
    # Enums
    "AttackKind",
    "CharacterClass",
    "ItemCategory",
    "MonsterKind",
    # Items
    "Item",
    "Inventory",
    "InventorySortStrategy",
    "SortByCategory",
    "SortByName",
    "SortByValue",
    # Characters
    "AnyCharacter",
    "AttackOutcome",
    "Character",
    "Mage",
    "Warrior",
    # Monsters
    "AnyMonster",
    "Goblin",
    "Monster",
    "Troll",
    # Dungeons
    "DungeonBuilder",
    "DungeonDescriptor",
    "default_dungeons",
    # Factories
    "available_character_classes",
    "character_from_json",
    "character_to_json",
    "create_character",
    "create_monster",
]
