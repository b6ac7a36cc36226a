"""Per-run game session shared by the screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rpg_adventure.models.dungeon import DungeonDescriptor, default_dungeons


if TYPE_CHECKING:
    from rpg_adventure.engine.dice import DiceRoller
    from rpg_adventure.engine.explorer import DungeonExplorer
    from rpg_adventure.engine.observer import StaminaRecoverySystem
    from rpg_adventure.storage.saves import CharacterRepository
    from rpg_adventure.ui.console import GameConsole


@dataclass
class GameSession:
    """Collaborators for one run of the game.

    Attributes:
        console: Where screens print and read.
        dice: Random source handed to new characters.
        repository: Save game storage.
        recovery: Stamina recovery system owned by this run.
        explorer: Runs dungeon encounters.
        dungeons: Dungeons offered by the dungeon menu.
        pause_after_action: Wait for Enter after each menu action.
    """

    console: GameConsole
    dice: DiceRoller
    repository: CharacterRepository
    recovery: StaminaRecoverySystem
    explorer: DungeonExplorer
    dungeons: list[DungeonDescriptor] = field(default_factory=default_dungeons)
    pause_after_action: bool = True


__all__ = ["GameSession"]
