"""RPG Adventure - a turn-based text role-playing game.

The player creates or loads a Warrior or Mage, trains and rests, manages
equipment and explores dungeons where a single monster waits.

Example:
    >>> from rpg_adventure import create_character, create_monster, DiceRoller
    >>>
    >>> dice = DiceRoller(seed=7)
    >>> hero = create_character("warrior", "Aria", dice=dice)
    >>> goblin = create_monster("goblin", dice=dice)
    >>> goblin.take_damage(hero.attack().damage) >= 15
    True

Modules:
    core: Configuration, logging, validation and base exceptions.
    models: Pydantic models for items, inventories, characters, monsters, dungeons.
    engine: Dice, stamina recovery, combat and dungeon exploration.
    storage: SQLite save games.
    ui: Console, menu navigation tree, screens and the game manager.
"""

from __future__ import annotations

# Core
from rpg_adventure.core.config import Settings, get_settings
from rpg_adventure.core.exceptions import RpgAdventureError
from rpg_adventure.core.logging import configure_logging, get_logger

# Engine
from rpg_adventure.engine.dice import DiceRoller
from rpg_adventure.engine.explorer import DungeonExplorer, ExplorationOutcome

# Models
from rpg_adventure.models import (
    Character,
    Item,
    ItemCategory,
    Mage,
    Monster,
    Warrior,
    create_character,
    create_monster,
)

# UI
from rpg_adventure.ui.game import GameManager


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "RpgAdventureError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "DiceRoller",
    "DungeonExplorer",
    "ExplorationOutcome",
    # Models
    "Character",
    "Item",
    "ItemCategory",
    "Mage",
    "Monster",
    "Warrior",
    "create_character",
    "create_monster",
    # UI
    "GameManager",
]
