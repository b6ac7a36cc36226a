"""Tests for the concrete game screens."""

from __future__ import annotations

from typing import Any

import pytest

from rpg_adventure.models import Goblin, SortByCategory, SortByValue, Warrior, default_dungeons
from rpg_adventure.ui.menu import NavigationSignal
from rpg_adventure.ui.screens import (
    build_character_menu,
    build_dungeon_menu,
    build_inventory_menu,
    build_main_menu,
    create_new_character,
    enter_character_menu,
    equip_item,
    explore_dungeon,
    load_character,
    rest_character,
    save_character,
    show_items,
    train_character,
)


@pytest.fixture
def session_dungeon() -> Any:
    """The Goblin Cave."""
    return default_dungeons()[0]


class TestMenuLayout:
    """Tests for how the menus are assembled."""

    def test_main_menu(self, make_session) -> None:
        """Test the main menu options."""
        session, _ = make_session()
        menu = build_main_menu(session)

        assert menu.is_root
        assert menu.option_lines() == ["1. Create new character", "2. Load character", "0. Exit"]

    def test_character_menu(self, make_session, warrior: Any) -> None:
        """Test the character menu options and that it has no Back option."""
        session, _ = make_session()
        menu = build_character_menu(session, warrior)

        assert menu.terminal
        assert menu.option_lines() == [
            "1. Train",
            "2. Rest",
            "3. Open inventory",
            "4. Explore dungeons",
            "5. Save",
            "6. Back to main menu",
        ]

    def test_inventory_menu(self, make_session, warrior: Any) -> None:
        """Test the inventory menu options."""
        session, _ = make_session()
        labels = [child.label for child in build_inventory_menu(session, warrior).children]

        assert labels == [
            "Show all items",
            "Show items by category",
            "Show items by value",
            "Show items by name",
            "Equip an item",
            "Back to character menu",
        ]

    def test_dungeon_menu(self, make_session, warrior: Any) -> None:
        """Test the dungeon menu lists the dungeons in order."""
        session, _ = make_session()
        labels = [child.label for child in build_dungeon_menu(session, warrior).children]

        assert labels == ["Goblin Cave", "Swamp of Trolls", "Back to character menu"]

    def test_inventory_back_returns_to_character_menu(self, make_session, warrior: Any) -> None:
        """Test the inventory's Back option unwinds to the character menu."""
        session, h = make_session("3", "6", "6")

        signal = build_character_menu(session, warrior).execute()

        assert signal is NavigationSignal.RETURN_TO_ROOT
        assert h.lines.count("=== CHARACTER MENU - ARIA ===") == 2


class TestCharacterCreation:
    """Tests for create_new_character."""

    def test_creates_and_enters_menu(self, make_session) -> None:
        """Test a valid class and name open the character menu."""
        session, h = make_session("Warrior", "Aria", "6")

        signal = create_new_character(session)

        assert signal is NavigationSignal.RETURN_TO_ROOT
        assert "Character created: Aria" in h.lines
        assert "=== CHARACTER MENU - ARIA ===" in h.lines
        assert "- mage: Magic user with spells" in h.lines

    def test_unknown_class(self, make_session) -> None:
        """Test an unknown class fails creation."""
        session, h = make_session("rogue", "Aria")

        assert create_new_character(session) is None
        assert "Invalid character type!" in h.lines
        assert "Creation failed!" in h.lines

    def test_invalid_name(self, make_session) -> None:
        """Test a short name is rejected."""
        session, h = make_session("mage", "A")

        assert create_new_character(session) is None
        assert "Name too short!" in h.lines


class TestLoadCharacter:
    """Tests for load_character."""

    def test_no_saves(self, make_session) -> None:
        """Test loading with no saves reports it."""
        session, h = make_session()

        assert load_character(session) is None
        assert "No saves found!" in h.lines

    def test_loads_chosen_slot(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test a chosen save is loaded with the session dice."""
        save_store.save(warrior, "alpha")
        session, h = make_session("1")

        signal = load_character(session)

        assert signal is NavigationSignal.EXIT
        assert "1. alpha" in h.lines
        assert "Character loaded: Aria" in h.lines

    def test_cancel(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test option 0 cancels loading."""
        save_store.save(warrior, "alpha")
        session, h = make_session("0")

        assert load_character(session) is None
        assert "Character loaded: Aria" not in h.lines

    def test_invalid_choice(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test an out-of-range choice loads nothing."""
        save_store.save(warrior, "alpha")
        session, h = make_session("5")

        assert load_character(session) is None
        assert "Choose between 0 and 1!" in h.lines

    def test_dead_character_returns_to_main(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test a saved dead character cannot be played."""
        warrior.take_damage(500)
        save_store.save(warrior, "fallen")
        session, h = make_session("1")

        assert load_character(session) is NavigationSignal.RETURN_TO_ROOT
        assert "Your character is dead! Returning to the main menu." in h.lines


class TestEnterCharacterMenu:
    """Tests for enter_character_menu."""

    def test_dead_character(self, make_session, warrior: Any) -> None:
        """Test a dead character never sees the character menu."""
        warrior.take_damage(500)
        session, h = make_session()

        assert enter_character_menu(session, warrior) is NavigationSignal.RETURN_TO_ROOT
        assert "=== CHARACTER MENU - ARIA ===" not in h.lines


class TestTrainAndRest:
    """Tests for the train and rest actions."""

    def test_train(self, make_session, warrior: Any) -> None:
        """Test training spends gold and stamina and raises damage."""
        session, h = make_session()

        train_character(session, warrior)

        assert warrior.money == 50
        assert warrior.stamina == 90
        assert "Training complete!" in h.lines
        assert "Damage increased from 15 to 17" in h.lines
        assert "Stamina spent: -10 (Current stamina: 90)" in h.lines

    def test_train_without_stamina(self, make_session, warrior: Any) -> None:
        """Test training needs 10 stamina."""
        warrior.stamina = 9
        session, h = make_session()

        train_character(session, warrior)

        assert warrior.money == 100
        assert warrior.level == 1
        assert "Not enough stamina to train! (At least 10 needed)" in h.lines

    def test_train_without_money(self, make_session, warrior: Any) -> None:
        """Test failed training keeps stamina."""
        warrior.money = 40
        session, h = make_session()

        train_character(session, warrior)

        assert warrior.stamina == 100
        assert "Not enough money to train! (Training costs 50 gold)" in h.lines

    def test_rest(self, make_session, warrior: Any) -> None:
        """Test resting reports the stamina recovered."""
        warrior.stamina = 40
        session, h = make_session()

        rest_character(session, warrior)

        assert warrior.stamina == 100
        assert "Stamina recovered: +60" in h.lines

    def test_rest_when_rested(self, make_session, warrior: Any) -> None:
        """Test resting at full stamina changes nothing."""
        session, h = make_session()

        rest_character(session, warrior)

        assert "You are already fully rested!" in h.lines


class TestSaveCharacter:
    """Tests for save_character."""

    def test_save(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test a save returns to the main menu."""
        session, h = make_session("slot 1")

        assert save_character(session, warrior) is NavigationSignal.RETURN_TO_ROOT
        assert save_store.list_saves() == ["slot_1"]
        assert "Character saved!" in h.lines

    def test_invalid_name(self, make_session, warrior: Any, save_store: Any) -> None:
        """Test unsafe slot names are refused."""
        session, h = make_session("../evil")

        assert save_character(session, warrior) is None
        assert save_store.list_saves() == []
        assert "Invalid save name!" in h.lines

    def test_empty_name(self, make_session, warrior: Any) -> None:
        """Test an empty slot name is refused."""
        session, h = make_session("   ")

        assert save_character(session, warrior) is None
        assert "Save name cannot be empty!" in h.lines


class TestInventoryScreens:
    """Tests for the inventory listings and equipping."""

    def test_empty(self, make_session, warrior: Any) -> None:
        """Test listing an empty inventory."""
        session, h = make_session()

        show_items(session, warrior, SortByValue(), "ITEMS BY VALUE")

        assert "The inventory is empty." in h.lines

    def test_by_value(self, make_session, warrior: Any, club: Any, gem: Any) -> None:
        """Test the value listing is numbered, most valuable first."""
        warrior.add_item(club)
        warrior.add_item(gem)
        session, h = make_session()

        show_items(session, warrior, SortByValue(), "ITEMS BY VALUE")

        assert "Items in inventory: 2" in h.lines
        assert "1. Gem [Miscellaneous] - Value: 75 gold" in h.lines
        assert "2. Club [Weapon] - Value: 50 gold" in h.lines
        assert "Total value: 125 gold" in h.lines

    def test_by_category(self, make_session, warrior: Any, club: Any, gem: Any) -> None:
        """Test the category listing groups items under headings."""
        warrior.add_item(gem)
        warrior.add_item(club)
        session, h = make_session()

        show_items(session, warrior, SortByCategory(), "ITEMS BY CATEGORY")

        assert h.lines.index("WEAPONS:") < h.lines.index("MISCELLANEOUS:")
        assert "  - Club - 50 gold (+3)" in h.lines
        assert "  - Gem - 75 gold" in h.lines
        assert "Total items: 2" in h.lines

    def test_equip(self, make_session, warrior: Any, club: Any, health_potion: Any) -> None:
        """Test equipping the chosen item."""
        warrior.add_item(health_potion)
        warrior.add_item(club)
        session, h = make_session("1")

        equip_item(session, warrior)

        assert warrior.inventory.is_equipped(club)
        assert "Equipped Club!" in h.lines
        assert "Total damage: 18" in h.lines

    def test_equip_nothing(self, make_session, warrior: Any, health_potion: Any) -> None:
        """Test equipping with only potions carried."""
        warrior.add_item(health_potion)
        session, h = make_session()

        equip_item(session, warrior)

        assert "You have nothing to equip." in h.lines


class TestExploreDungeon:
    """Tests for explore_dungeon."""

    def test_victory_stays(self, make_session, make_dice, session_dungeon: Any) -> None:
        """Test a victory keeps the player in the dungeon menu."""
        hero = Warrior(name="Aria", dice=make_dice(default=4))
        session, h = make_session(monster=Goblin(health=5, drop_chance=0, dice=make_dice()))

        assert explore_dungeon(session, hero, session_dungeon) is None
        assert "=== GOBLIN CAVE ===" in h.lines
        assert "You won!" in h.lines
        assert "[UI] Aria recovers 10 stamina" in h.lines

    def test_defeat_returns_to_main(self, make_session, make_dice, session_dungeon: Any) -> None:
        """Test a defeat sends the player to the main menu."""
        hero = Warrior(name="Aria", health=1, dice=make_dice())
        session, h = make_session(monster=Goblin(dice=make_dice()))

        assert explore_dungeon(session, hero, session_dungeon) is NavigationSignal.RETURN_TO_ROOT
        assert "Returning to the main menu." in h.lines
