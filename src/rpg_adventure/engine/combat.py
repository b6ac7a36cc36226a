"""Single attack exchanges between a character and a monster."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rpg_adventure.core.exceptions import CombatError
from rpg_adventure.core.logging import get_logger
from rpg_adventure.models.enums import AttackKind


if TYPE_CHECKING:
    from rpg_adventure.models.character import Character
    from rpg_adventure.models.monster import Monster
    from rpg_adventure.ui.console import GameConsole

logger = get_logger(__name__)


class CombatResolver:
    """Resolves one attack at a time and reports it on the console."""

    def __init__(self, console: GameConsole) -> None:
        self._console = console

    def execute_attack(self, character: Character, monster: Monster) -> int:
        """Let the character attack the monster.

        Returns:
            Health the monster lost.

        Raises:
            CombatError: If either side is already dead.
        """
        self._require_alive(character.name, character.is_alive, monster.name, monster.is_alive)
        outcome = character.attack()
        if outcome.kind is AttackKind.EXHAUSTED:
            logger.info("Attack skipped, character exhausted", character=character.name)
            self._console.emit("You are too exhausted to attack!")
            return 0

        if outcome.kind is AttackKind.SPELL:
            self._console.emit(f"{character.name} casts a spell!")
        elif outcome.kind is AttackKind.STAFF:
            self._console.emit(f"{character.name} strikes with the staff (not enough mana).")

        lost = monster.take_damage(outcome.damage)
        logger.info(
            "Character hit monster",
            character=character.name,
            monster=monster.name,
            damage=outcome.damage,
            kind=outcome.kind,
        )
        self._console.emit(f"You dealt {outcome.damage} damage!")
        self._console.emit(f"{monster.display_name} health: {monster.health}/{monster.max_health}")
        return lost

    def execute_monster_attack(self, monster: Monster, character: Character) -> int:
        """Let the monster attack the character.

        Returns:
            Health the character lost.

        Raises:
            CombatError: If either side is already dead.
        """
        self._require_alive(monster.name, monster.is_alive, character.name, character.is_alive)
        damage = monster.attack()
        lost = character.take_damage(damage)
        logger.info(
            "Monster hit character",
            monster=monster.name,
            character=character.name,
            damage=damage,
        )
        self._console.emit(f"{monster.display_name} dealt {damage} damage to you!")
        return lost

    @staticmethod
    def _require_alive(attacker: str, attacker_alive: bool, target: str, target_alive: bool) -> None:
        if not attacker_alive:
            raise CombatError("A defeated combatant cannot attack", combatant=attacker)
        if not target_alive:
            raise CombatError("Cannot attack a defeated combatant", combatant=target)


__all__ = ["CombatResolver"]
