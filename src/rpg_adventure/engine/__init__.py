"""Game engine for RPG Adventure.

Submodules:
    dice: Injectable random source for damage and drop rolls
    observer: Stamina recovery and its observers
    combat: Single attack exchanges
    explorer: Dungeon encounters fought to the end

Example:
    >>> from rpg_adventure.engine import CombatResolver, DungeonExplorer
    >>> explorer = DungeonExplorer(CombatResolver(console), recovery, console, create_monster)
    >>> result = explorer.explore(hero, cave)
    >>> result.outcome
    <ExplorationOutcome.VICTORY: 'victory'>
"""

from __future__ import annotations

# =============================================================================
# Dice Rolling
# =============================================================================
from rpg_adventure.engine.dice import (
    DiceRoller,
    RollRecord,
    RollType,
)

# =============================================================================
# Stamina Notifications
# =============================================================================
from rpg_adventure.engine.observer import (
    ConsoleStaminaObserver,
    StaminaObserver,
    StaminaRecoverySystem,
)

# =============================================================================
# Combat
# =============================================================================
from rpg_adventure.engine.combat import CombatResolver
from rpg_adventure.engine.explorer import (
    DungeonExplorer,
    ExplorationOutcome,
    ExplorationResult,
    MonsterFactory,
)


__all__ = [
    # Dice Rolling
    "DiceRoller",
    "RollRecord",
    "RollType",
    # Stamina Notifications
    "StaminaObserver",
    "StaminaRecoverySystem",
    "ConsoleStaminaObserver",
    # Combat
    "CombatResolver",
    "DungeonExplorer",
    "ExplorationOutcome",
    "ExplorationResult",
    "MonsterFactory",
]
