"""Player characters: the Warrior and Mage variants.

Characters are pydantic models so they can be validated, copied and
saved as JSON. The ``character_class`` literal discriminates the
variants when a save is loaded (see ``AnyCharacter``).

Invariants enforced on construction and on every assignment:

* 0 <= health <= max_health
* 0 <= stamina <= max_stamina
* max_health, max_stamina, base_damage >= 1
* (Mage) 0 <= mana <= max_mana
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rpg_adventure.core.constants import (
    DEFAULT_CHARACTER_NAME,
    MAGE_ATTACK_STAMINA,
    MAGE_SPELL_MANA,
    MIN_DAMAGE,
    STARTING_LEVEL,
    STARTING_MONEY,
    TRAINING_COST,
    WARRIOR_ATTACK_STAMINA,
)
from rpg_adventure.core.logging import get_logger
from rpg_adventure.engine.dice import DiceRoller
from rpg_adventure.models.enums import AttackKind, CharacterClass
from rpg_adventure.models.inventory import Inventory
from rpg_adventure.models.item import Item


logger = get_logger(__name__)


@dataclass(frozen=True)
class AttackOutcome:
    """Result of a character attack.

    Attributes:
        damage: Damage dealt; 0 only when the attack was exhausted.
        kind: How the attack was carried out.
    """

    damage: int
    kind: AttackKind

    @property
    def succeeded(self) -> bool:
        return self.kind is not AttackKind.EXHAUSTED


EXHAUSTED_ATTACK = AttackOutcome(damage=0, kind=AttackKind.EXHAUSTED)


class Character(BaseModel, ABC):
    """State and behaviour shared by every playable class.

    Subclasses fix their starting stats, their attack, and how training
    improves them.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    attack_stamina_cost: ClassVar[int]
    """Stamina the attack needs and spends."""

    name: str = Field(default=DEFAULT_CHARACTER_NAME, description="Character name")
    health: int = Field(ge=0, description="Current health")
    max_health: int = Field(ge=1, description="Maximum health")
    stamina: int = Field(ge=0, description="Current stamina")
    max_stamina: int = Field(ge=1, description="Maximum stamina")
    base_damage: int = Field(ge=1, description="Damage before equipment and rolls")
    money: int = Field(default=STARTING_MONEY, ge=0, description="Gold carried")
    level: int = Field(default=STARTING_LEVEL, ge=1, description="Character level")
    inventory: Inventory = Field(default_factory=Inventory)

    dice: DiceRoller = Field(default_factory=DiceRoller, exclude=True, repr=False)

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: Any) -> Any:
        """Trim the name; a blank name becomes the default name."""
        if value is None:
            return DEFAULT_CHARACTER_NAME
        if isinstance(value, str):
            return value.strip() or DEFAULT_CHARACTER_NAME
        return value

    @model_validator(mode="after")
    def check_pools(self) -> Self:
        """Keep current pools within their maxima."""
        if self.health > self.max_health:
            raise ValueError(f"health {self.health} exceeds max_health {self.max_health}")
        if self.stamina > self.max_stamina:
            raise ValueError(f"stamina {self.stamina} exceeds max_stamina {self.max_stamina}")
        return self

    # -------------------------------------------------------------------------
    # Combat
    # -------------------------------------------------------------------------

    @abstractmethod
    def attack(self) -> AttackOutcome:
        """Attack once, spending stamina (and mana for a Mage spell)."""

    def _spend_attack_stamina(self) -> bool:
        if self.stamina < self.attack_stamina_cost:
            logger.debug(
                "Attack suppressed, not enough stamina",
                character=self.name,
                stamina=self.stamina,
                required=self.attack_stamina_cost,
            )
            return False
        self.stamina -= self.attack_stamina_cost
        return True

    def take_damage(self, amount: int) -> int:
        """Lose health, floored at zero.

        Negative amounts are ignored.

        Returns:
            Health actually lost.
        """
        if amount < 0:
            logger.warning("Negative damage ignored", character=self.name, amount=amount)
            return 0
        before = self.health
        self.health = max(0, self.health - amount)
        if before > 0 and not self.is_alive:
            logger.info("Character defeated", character=self.name)
        return before - self.health

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def total_damage(self) -> int:
        """Base damage plus the bonus of equipped items."""
        return self.base_damage + self.inventory.total_stat_bonus()

    # -------------------------------------------------------------------------
    # Stamina, rest and training
    # -------------------------------------------------------------------------

    def restore_stamina(self, delta: int) -> int:
        """Change stamina by ``delta``, clamped to ``[0, max_stamina]``.

        This never notifies stamina observers; only the recovery system
        does that.

        Returns:
            The signed change actually applied.
        """
        if delta == 0:
            return 0
        before = self.stamina
        self.stamina = min(self.max_stamina, max(0, self.stamina + delta))
        return self.stamina - before

    def rest(self) -> None:
        """Refill stamina."""
        self.stamina = self.max_stamina
        logger.info("Character rested", character=self.name)

    @property
    def is_fully_rested(self) -> bool:
        return self.stamina == self.max_stamina

    def train(self) -> bool:
        """Pay for a training session and improve permanently.

        Returns:
            False, with nothing changed, when the character cannot pay.
        """
        if self.money < TRAINING_COST:
            logger.info("Training refused, not enough money", character=self.name, money=self.money)
            return False
        self.money -= TRAINING_COST
        self._apply_training()
        self.level += 1
        logger.info("Character trained", character=self.name, level=self.level)
        return True

    @abstractmethod
    def _apply_training(self) -> None:
        """Apply the class-specific stat increase."""

    def add_money(self, amount: int) -> None:
        """Receive gold. Negative amounts are ignored."""
        if amount < 0:
            logger.warning("Negative gold ignored", character=self.name, amount=amount)
            return
        self.money += amount

    # -------------------------------------------------------------------------
    # Inventory delegation
    # -------------------------------------------------------------------------

    def add_item(self, item: Item | None) -> bool:
        """Put an item in the inventory. Returns False for a missing item."""
        if item is None:
            return False
        self.inventory.add_item(item)
        return True

    def equip_item(self, item: Item | None) -> bool:
        """Equip a carried item. No-op returning False otherwise."""
        equipped = self.inventory.equip(item)
        if equipped and item is not None:
            logger.info("Item equipped", character=self.name, item=item.name)
        return equipped

    def show_inventory(self) -> list[str]:
        """Lines describing the character's equipment."""
        lines = [f"=== {self.name}'s Equipment ===", *self.inventory.describe()]
        bonus = self.inventory.total_stat_bonus()
        if bonus > 0:
            lines.append(self._bonus_line(bonus))
        return lines

    def _bonus_line(self, bonus: int) -> str:
        return f"Equipment bonus: +{bonus} damage"

    @property
    def class_name(self) -> str:
        return self.__class__.__name__

    def summary(self) -> str:
        """One-line status for menus."""
        return (
            f"{self.class_name} {self.name} [HP: {self.health}/{self.max_health}, "
            f"Stamina: {self.stamina}/{self.max_stamina}, Damage: {self.total_damage}, "
            f"Money: {self.money}, Level: {self.level}]"
        )

    def __str__(self) -> str:
        return self.summary()


class Warrior(Character):
    """Strong fighter with high health.

    Attacks cost 5 stamina and deal base damage, equipment bonus and a
    0-4 roll. Training adds 2 damage and 5 max health and heals fully.
    """

    attack_stamina_cost: ClassVar[int] = WARRIOR_ATTACK_STAMINA

    character_class: Literal[CharacterClass.WARRIOR] = CharacterClass.WARRIOR
    health: int = Field(default=120, ge=0)
    max_health: int = Field(default=120, ge=1)
    stamina: int = Field(default=100, ge=0)
    max_stamina: int = Field(default=100, ge=1)
    base_damage: int = Field(default=15, ge=1)

    def attack(self) -> AttackOutcome:
        if not self._spend_attack_stamina():
            return EXHAUSTED_ATTACK
        damage = self.total_damage + self.dice.bonus(5)
        damage = max(MIN_DAMAGE, damage)
        logger.debug("Warrior attack", character=self.name, damage=damage)
        return AttackOutcome(damage=damage, kind=AttackKind.WEAPON)

    def _apply_training(self) -> None:
        self.base_damage += 2
        self.max_health += 5
        self.health = self.max_health


class Mage(Character):
    """Magic user with spells.

    Attacks cost 3 stamina. With at least 10 mana the Mage casts a
    spell (mana -10, +5 and a 0-9 roll); otherwise it swings its staff
    for a 0-2 roll and spends no mana.
    """

    attack_stamina_cost: ClassVar[int] = MAGE_ATTACK_STAMINA

    character_class: Literal[CharacterClass.MAGE] = CharacterClass.MAGE
    health: int = Field(default=80, ge=0)
    max_health: int = Field(default=80, ge=1)
    stamina: int = Field(default=120, ge=0)
    max_stamina: int = Field(default=120, ge=1)
    base_damage: int = Field(default=10, ge=1)
    mana: int = Field(default=50, ge=0, description="Current mana")
    max_mana: int = Field(default=50, ge=1, description="Maximum mana")

    @model_validator(mode="after")
    def check_mana(self) -> Self:
        if self.mana > self.max_mana:
            raise ValueError(f"mana {self.mana} exceeds max_mana {self.max_mana}")
        return self

    def attack(self) -> AttackOutcome:
        if not self._spend_attack_stamina():
            return EXHAUSTED_ATTACK

        if self.mana >= MAGE_SPELL_MANA:
            self.mana -= MAGE_SPELL_MANA
            damage = self.total_damage + 5 + self.dice.bonus(10)
            kind = AttackKind.SPELL
        else:
            damage = self.total_damage + self.dice.bonus(3)
            kind = AttackKind.STAFF

        damage = max(MIN_DAMAGE, damage)
        logger.debug("Mage attack", character=self.name, damage=damage, kind=kind, mana=self.mana)
        return AttackOutcome(damage=damage, kind=kind)

    def rest(self) -> None:
        """Refill stamina and mana."""
        super().rest()
        self.mana = self.max_mana

    @property
    def is_fully_rested(self) -> bool:
        return super().is_fully_rested and self.mana == self.max_mana

    def _apply_training(self) -> None:
        self.base_damage += 1
        self.max_mana += 10
        self.mana = self.max_mana
        self.max_stamina += 5

    def _bonus_line(self, bonus: int) -> str:
        return f"Magic bonus: +{bonus} power"

    def show_inventory(self) -> list[str]:
        return [*super().show_inventory(), f"Mana: {self.mana}/{self.max_mana}"]

    def summary(self) -> str:
        return (
            f"Mage {self.name} [HP: {self.health}/{self.max_health}, "
            f"Stamina: {self.stamina}/{self.max_stamina}, Mana: {self.mana}/{self.max_mana}, "
            f"Power: {self.total_damage}, Money: {self.money}, Level: {self.level}]"
        )


AnyCharacter = Annotated[Warrior | Mage, Field(discriminator="character_class")]
"""Discriminated union used to load a saved character."""


__all__ = [
    "AttackOutcome",
    "Character",
    "Warrior",
    "Mage",
    "AnyCharacter",
]
