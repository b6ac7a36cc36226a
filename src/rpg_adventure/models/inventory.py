"""Character inventory, equip slots and sort strategies.

The inventory keeps items in insertion order and tracks at most one
equipped item per equippable category. Membership is by identity:
the same Item object may be added twice, and equipping checks that
this exact object is carried.
"""

from __future__ import annotations

from typing import Protocol, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpg_adventure.core.exceptions import InventoryError
from rpg_adventure.core.logging import get_logger
from rpg_adventure.models.enums import ItemCategory
from rpg_adventure.models.item import Item


logger = get_logger(__name__)


# =============================================================================
# Sort Strategies
# =============================================================================


class InventorySortStrategy(Protocol):
    """Reorders an item list in place."""

    name: str

    def sort(self, items: list[Item]) -> None: ...


class SortByName:
    """Lexicographic by item name."""

    name = "by_name"

    def sort(self, items: list[Item]) -> None:
        items.sort(key=lambda item: item.name)


class SortByCategory:
    """Category order (weapon, armor, potion, misc), then name."""

    name = "by_category"

    def sort(self, items: list[Item]) -> None:
        items.sort(key=lambda item: (item.category.order, item.name))


class SortByValue:
    """Most valuable first; equal values keep their relative order."""

    name = "by_value"

    def sort(self, items: list[Item]) -> None:
        items.sort(key=lambda item: item.value, reverse=True)


# =============================================================================
# Inventory
# =============================================================================


class Inventory(BaseModel):
    """Items carried by one character plus its equip slots.

    Attributes:
        items: Carried items in their current order.
        equipped: Equip slot occupant per equippable category.
    """

    model_config = ConfigDict(extra="forbid")

    items: list[Item] = Field(default_factory=list)
    equipped: dict[ItemCategory, Item] = Field(default_factory=dict)

    @model_validator(mode="after")
    def bind_equipped_items(self) -> Self:
        """Point every equip slot at an entry of ``items``.

        A deserialized inventory holds equal-but-distinct copies of its
        equipped items; rebinding restores the identity invariant.
        """
        for category, equipped_item in list(self.equipped.items()):
            if equipped_item.category != category:
                raise ValueError(
                    f"{equipped_item.name} cannot occupy the {category.value} slot"
                )
            if not equipped_item.is_equippable:
                raise ValueError(f"{equipped_item.name} is not equippable")
            if self._contains(equipped_item):
                continue
            match = next((item for item in self.items if item == equipped_item), None)
            if match is None:
                raise ValueError(f"Equipped item {equipped_item.name} is not in the inventory")
            self.equipped[category] = match
        return self

    def _contains(self, item: Item) -> bool:
        return any(existing is item for existing in self.items)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_item(self, item: Item | None) -> None:
        """Append an item. There is no capacity limit.

        Raises:
            InventoryError: If ``item`` is None.
        """
        if item is None:
            raise InventoryError("Cannot add a missing item to the inventory")
        self.items.append(item)
        logger.debug("Item added", item=item.name, size=len(self.items))

    def equip(self, item: Item | None) -> bool:
        """Equip an item, replacing the current occupant of its slot.

        The replaced item stays in the inventory.

        Returns:
            False, with no change, if the item is missing, not
            equippable, or not carried.
        """
        if item is None or not item.is_equippable:
            return False
        if not self._contains(item):
            logger.debug("Equip refused, item not carried", item=item.name)
            return False

        previous = self.equipped.get(item.category)
        self.equipped[item.category] = item
        logger.debug(
            "Item equipped",
            item=item.name,
            slot=item.category.value,
            replaced=previous.name if previous is not None else None,
        )
        return True

    def sorted_view(self, strategy: InventorySortStrategy | None) -> list[Item]:
        """Sort the stored items in place and return them.

        Later views see the last applied order. ``None`` keeps the
        current order.
        """
        if strategy is not None:
            strategy.sort(self.items)
            logger.debug("Inventory sorted", strategy=strategy.name)
        return list(self.items)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_equipped(self, item: Item) -> bool:
        return self.equipped.get(item.category) is item

    def equipped_item(self, category: ItemCategory) -> Item | None:
        return self.equipped.get(category)

    def equippable_items(self) -> list[Item]:
        return [item for item in self.items if item.is_equippable]

    def total_value(self) -> int:
        """Sum of value over every carried item, equipped or not."""
        return sum(item.value for item in self.items)

    def total_stat_bonus(self) -> int:
        """Sum of stat bonus over equipped items only."""
        return sum(item.stat_bonus for item in self.equipped.values())

    def group_by_category(self) -> dict[ItemCategory, list[Item]]:
        """Carried items grouped per category, in category order.

        Categories without items are omitted.
        """
        groups: dict[ItemCategory, list[Item]] = {}
        for category in ItemCategory:
            members = [item for item in self.items if item.category is category]
            if members:
                groups[category] = members
        return groups

    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def describe(self) -> list[str]:
        """Lines summarising the inventory grouped by category."""
        lines = [
            "=== INVENTORY ===",
            f"Total items: {self.size}",
            f"Total value: {self.total_value()} gold",
        ]
        if self.is_empty:
            lines.append("Inventory is empty")
            return lines

        for category, members in self.group_by_category().items():
            lines.append(f"{category.plural_name}:")
            for item in members:
                marker = " [EQUIPPED]" if self.is_equipped(item) else ""
                lines.append(f"  - {item}{marker}")
        return lines


__all__ = [
    "InventorySortStrategy",
    "SortByName",
    "SortByCategory",
    "SortByValue",
    "Inventory",
]
