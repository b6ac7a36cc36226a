"""Dungeon descriptors and their builder."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from rpg_adventure.core.exceptions import ValidationError
from rpg_adventure.core.logging import get_logger


logger = get_logger(__name__)


class DungeonDescriptor(BaseModel):
    """An explorable dungeon.

    Attributes:
        name: Display name, also used as the menu label.
        description: Flavour text shown on entry.
        gold_reward: Gold paid on top of the monster's own gold.
        monster_type: Monster factory key (case-insensitive).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    description: str = ""
    gold_reward: int = Field(default=0, ge=0)
    monster_type: str = Field(min_length=1)


class DungeonBuilder:
    """Fluent builder for DungeonDescriptor.

    Call ``reset()`` before every new descriptor. ``build()`` does not
    keep the product, so the builder can be reused.

    Example:
        >>> cave = (
        ...     DungeonBuilder()
        ...     .reset()
        ...     .set_name("Goblin Cave")
        ...     .set_gold_reward(100)
        ...     .build()
        ... )
        >>> cave.monster_type
        'goblin'
    """

    DEFAULT_NAME = "Dungeon"
    DEFAULT_DESCRIPTION = "A mysterious dungeon"
    DEFAULT_GOLD_REWARD = 50
    DEFAULT_MONSTER_TYPE = "goblin"

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> Self:
        self._name = self.DEFAULT_NAME
        self._description = self.DEFAULT_DESCRIPTION
        self._gold_reward = self.DEFAULT_GOLD_REWARD
        self._monster_type = self.DEFAULT_MONSTER_TYPE
        return self

    def set_name(self, name: str) -> Self:
        self._name = name
        return self

    def set_description(self, description: str) -> Self:
        self._description = description
        return self

    def set_gold_reward(self, gold_reward: int) -> Self:
        self._gold_reward = gold_reward
        return self

    def set_monster_type(self, monster_type: str) -> Self:
        self._monster_type = monster_type
        return self

    def build(self) -> DungeonDescriptor:
        """Create the descriptor from the current builder state.

        Raises:
            ValidationError: If a value breaks a descriptor constraint
                (e.g. a negative reward).
        """
        try:
            dungeon = DungeonDescriptor(
                name=self._name,
                description=self._description,
                gold_reward=self._gold_reward,
                monster_type=self._monster_type,
            )
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field_name = ".".join(str(part) for part in first["loc"])
            raise ValidationError(
                f"Invalid dungeon: {first['msg']}",
                field_name=field_name,
                invalid_value=first.get("input"),
            ) from exc
        logger.debug("Dungeon built", dungeon=dungeon.name, monster_type=dungeon.monster_type)
        return dungeon


def default_dungeons(builder: DungeonBuilder | None = None) -> list[DungeonDescriptor]:
    """The dungeons offered by the dungeon menu, in menu order."""
    builder = builder or DungeonBuilder()
    goblin_cave = (
        builder.reset()
        .set_name("Goblin Cave")
        .set_description("A cave full of goblins.")
        .set_gold_reward(100)
        .set_monster_type("goblin")
        .build()
    )
    troll_swamp = (
        builder.reset()
        .set_name("Swamp of Trolls")
        .set_description("A dangerous swamp crawling with trolls.")
        .set_gold_reward(200)
        .set_monster_type("troll")
        .build()
    )
    return [goblin_cave, troll_swamp]


__all__ = [
    "DungeonDescriptor",
    "DungeonBuilder",
    "default_dungeons",
]
