"""Dungeon exploration: one encounter fought to the end.

The loop order is fixed: the character strikes first, a dead monster
ends the fight before it can answer, and only then does the monster
strike back. Exhausted attacks still use up the character's turn.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from rpg_adventure.core.logging import bind_context, clear_context, get_logger


if TYPE_CHECKING:
    from rpg_adventure.engine.combat import CombatResolver
    from rpg_adventure.engine.observer import StaminaRecoverySystem
    from rpg_adventure.models.character import Character
    from rpg_adventure.models.dungeon import DungeonDescriptor
    from rpg_adventure.models.item import Item
    from rpg_adventure.models.monster import Monster
    from rpg_adventure.ui.console import GameConsole

logger = get_logger(__name__)

MonsterFactory = Callable[[str], "Monster"]

DEFAULT_MAX_ROUNDS = 500


class ExplorationOutcome(StrEnum):
    """How an exploration ended."""

    VICTORY = "victory"
    DEFEAT = "defeat"
    STALEMATE = "stalemate"


@dataclass
class ExplorationResult:
    """Summary of one exploration.

    Attributes:
        outcome: Victory, defeat or stalemate.
        monster: The monster that was fought.
        rounds: Character turns taken.
        drops: Items added to the inventory.
        gold_earned: Monster gold plus the dungeon reward.
        stamina_recovered: Stamina gained after a victory.
    """

    outcome: ExplorationOutcome
    monster: Monster
    rounds: int = 0
    drops: list[Item] = field(default_factory=list)
    gold_earned: int = 0
    stamina_recovered: int = 0

    @property
    def victorious(self) -> bool:
        return self.outcome is ExplorationOutcome.VICTORY


class DungeonExplorer:
    """Runs a dungeon encounter for one character.

    Args:
        resolver: Resolves single attacks.
        recovery: Restores stamina after a victory.
        console: Where the fight is narrated.
        monster_factory: Creates the monster from the dungeon's monster type.
        max_rounds: Turn limit after which the fight is a stalemate.
    """

    def __init__(
        self,
        resolver: CombatResolver,
        recovery: StaminaRecoverySystem,
        console: GameConsole,
        monster_factory: MonsterFactory,
        *,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        self._resolver = resolver
        self._recovery = recovery
        self._console = console
        self._monster_factory = monster_factory
        self._max_rounds = max_rounds

    def explore(self, character: Character, dungeon: DungeonDescriptor) -> ExplorationResult:
        """Fight the dungeon's monster until one side falls."""
        monster = self._monster_factory(dungeon.monster_type)
        bind_context(character=character.name, dungeon=dungeon.name)
        try:
            logger.info("Exploration started", monster=monster.name)
            self._console.emit()
            self._console.emit(f"You are exploring {dungeon.name}")
            self._console.emit(dungeon.description)
            self._console.emit()
            self._console.emit(f"You encountered a {monster.display_name}!")

            result = self._fight(character, monster, dungeon)
            if result.victorious:
                result.stamina_recovered = self._recovery.recover_stamina(character)

            logger.info(
                "Exploration finished",
                outcome=result.outcome,
                rounds=result.rounds,
                gold=result.gold_earned,
            )
            return result
        finally:
            clear_context()

    def _fight(
        self,
        character: Character,
        monster: Monster,
        dungeon: DungeonDescriptor,
    ) -> ExplorationResult:
        rounds = 0
        while character.is_alive and monster.is_alive:
            if rounds >= self._max_rounds:
                logger.warning("Combat round limit reached", max_rounds=self._max_rounds)
                self._console.emit("The fight drags on and both sides retreat.")
                return ExplorationResult(ExplorationOutcome.STALEMATE, monster, rounds)

            rounds += 1
            self._console.emit()
            self._console.emit(f"HP: {character.health}/{character.max_health}")
            self._console.emit(f"Enemy: {monster.health} HP")

            self._resolver.execute_attack(character, monster)
            if not monster.is_alive:
                return self._claim_victory(character, monster, dungeon, rounds)

            self._resolver.execute_monster_attack(monster, character)
            if not character.is_alive:
                self._console.emit()
                self._console.emit("You have been defeated!")
                return ExplorationResult(ExplorationOutcome.DEFEAT, monster, rounds)

        if character.is_alive:
            return ExplorationResult(ExplorationOutcome.VICTORY, monster, rounds)
        return ExplorationResult(ExplorationOutcome.DEFEAT, monster, rounds)

    def _claim_victory(
        self,
        character: Character,
        monster: Monster,
        dungeon: DungeonDescriptor,
        rounds: int,
    ) -> ExplorationResult:
        drops = monster.roll_drops()
        gold = monster.gold_drop + dungeon.gold_reward
        character.add_money(gold)

        self._console.emit()
        self._console.emit("You won!")
        self._console.emit(f"You earned {gold} gold!")
        if drops:
            self._console.emit()
            self._console.emit("You found:")
            for item in drops:
                character.add_item(item)
                self._console.emit(f"  - {item}")

        return ExplorationResult(
            ExplorationOutcome.VICTORY,
            monster,
            rounds,
            drops=drops,
            gold_earned=gold,
        )


__all__ = [
    "ExplorationOutcome",
    "ExplorationResult",
    "DungeonExplorer",
    "MonsterFactory",
]
