"""Item value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rpg_adventure.models.enums import ItemCategory


class Item(BaseModel):
    """An immutable item.

    Two items with the same fields compare equal, but the inventory
    tracks items by identity, so two equal potions are two entries.

    Example:
        >>> club = Item(name="Club", category=ItemCategory.WEAPON, value=50, stat_bonus=3)
        >>> club.is_equippable
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(min_length=1, description="Display name")
    category: ItemCategory = Field(description="Item category / equip slot")
    value: int = Field(default=0, ge=0, description="Worth in gold")
    stat_bonus: int = Field(default=0, description="Additive combat bonus when equipped")

    @property
    def is_equippable(self) -> bool:
        return self.category.is_equippable

    def __str__(self) -> str:
        bonus = f" (+{self.stat_bonus})" if self.stat_bonus > 0 else ""
        return f"{self.name} [{self.category.display_name}] Value: {self.value} gold{bonus}"


__all__ = ["Item"]
