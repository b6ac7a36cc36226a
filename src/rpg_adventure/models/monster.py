"""Monsters fought in dungeons.

Monsters are created fresh for every encounter and never saved. Each
variant fixes its stats and its drop table.
"""

from __future__ import annotations

from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpg_adventure.core.constants import MIN_DAMAGE, MONSTER_DAMAGE_VARIANCE
from rpg_adventure.core.logging import get_logger
from rpg_adventure.engine.dice import DiceRoller
from rpg_adventure.models.enums import ItemCategory, MonsterKind
from rpg_adventure.models.item import Item


logger = get_logger(__name__)


class Monster(BaseModel):
    """Base monster model.

    Attributes:
        name: Display name.
        kind: Monster variant.
        health: Current health.
        max_health: Starting health.
        base_damage: Damage before variance.
        gold_drop: Gold handed to the winner.
        drop_chance: Percent chance (0-100) for each drop table entry.
        possible_drops: The drop table.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    name: str = Field(min_length=1)
    kind: MonsterKind
    health: int = Field(ge=0)
    max_health: int = Field(ge=1)
    base_damage: int = Field(ge=0)
    gold_drop: int = Field(default=0, ge=0)
    drop_chance: int = Field(default=0, ge=0, le=100)
    possible_drops: list[Item] = Field(default_factory=list)

    dice: DiceRoller = Field(default_factory=DiceRoller, exclude=True, repr=False)

    @model_validator(mode="after")
    def check_health(self) -> Self:
        if self.health > self.max_health:
            raise ValueError(f"health {self.health} exceeds max_health {self.max_health}")
        return self

    @property
    def display_name(self) -> str:
        return self.kind.value.capitalize()

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def attack(self) -> int:
        """Roll damage with up to 20% variance around the base damage."""
        variance = int(self.base_damage * MONSTER_DAMAGE_VARIANCE)
        damage = max(MIN_DAMAGE, self.base_damage + self.dice.variation(variance))
        logger.debug("Monster attack", monster=self.name, damage=damage)
        return damage

    def take_damage(self, amount: int) -> int:
        """Lose health, floored at zero.

        Negative amounts are logged and ignored. The hit that kills the
        monster calls ``on_defeat``; later hits do not.

        Returns:
            Health actually lost.
        """
        if amount < 0:
            logger.warning("Negative damage ignored", monster=self.name, amount=amount)
            return 0

        before = self.health
        self.health = max(0, self.health - amount)
        logger.info(
            "Monster took damage",
            monster=self.name,
            amount=amount,
            health_before=before,
            health_after=self.health,
        )
        if before > 0 and not self.is_alive:
            self.on_defeat()
        return before - self.health

    def on_defeat(self) -> None:
        """Hook called once when the monster dies."""
        logger.info("Monster defeated", monster=self.name, kind=self.kind)

    def add_possible_drop(self, item: Item | None) -> None:
        if item is not None:
            self.possible_drops.append(item)

    def roll_drops(self) -> list[Item]:
        """Roll every drop table entry independently.

        Every call rolls again; call it once per defeat and keep the
        result.
        """
        drops = [item for item in self.possible_drops if self.dice.chance(self.drop_chance)]
        logger.debug(
            "Drops rolled",
            monster=self.name,
            drops=[item.name for item in drops],
        )
        return drops

    def summary(self) -> str:
        return f"{self.display_name} [Health: {self.health}/{self.max_health}, Damage: {self.base_damage}]"

    def __str__(self) -> str:
        return self.summary()


def _goblin_drops() -> list[Item]:
    return [Item(name="Health Potion", category=ItemCategory.POTION, value=15, stat_bonus=0)]


def _troll_drops() -> list[Item]:
    return [
        Item(name="Large Health Potion", category=ItemCategory.POTION, value=30, stat_bonus=0),
        Item(name="Club", category=ItemCategory.WEAPON, value=50, stat_bonus=3),
    ]


class Goblin(Monster):
    """Weak cave dweller. Drops a Health Potion half of the time."""

    name: str = Field(default="Goblin", min_length=1)
    kind: Literal[MonsterKind.GOBLIN] = MonsterKind.GOBLIN
    health: int = Field(default=20, ge=0)
    max_health: int = Field(default=20, ge=1)
    base_damage: int = Field(default=5, ge=0)
    gold_drop: int = Field(default=10, ge=0)
    drop_chance: int = Field(default=50, ge=0, le=100)
    possible_drops: list[Item] = Field(default_factory=_goblin_drops)


class Troll(Monster):
    """Swamp brute. May drop a Large Health Potion and a Club."""

    name: str = Field(default="Troll", min_length=1)
    kind: Literal[MonsterKind.TROLL] = MonsterKind.TROLL
    health: int = Field(default=40, ge=0)
    max_health: int = Field(default=40, ge=1)
    base_damage: int = Field(default=8, ge=0)
    gold_drop: int = Field(default=20, ge=0)
    drop_chance: int = Field(default=50, ge=0, le=100)
    possible_drops: list[Item] = Field(default_factory=_troll_drops)


AnyMonster = Annotated[Goblin | Troll, Field(discriminator="kind")]


__all__ = [
    "Monster",
    "Goblin",
    "Troll",
    "AnyMonster",
]
