"""Concrete game screens.

Each ``build_*`` function assembles one menu of the navigation tree for
the current session (and character). Screen actions print through the
session console and return a NavigationSignal when they need to move
the player somewhere other than the current menu.

Tree:
    Main menu (root)
      Create new character -> Character menu
      Load character       -> Character menu
    Character menu (terminal)
      Train / Rest / Save / Back to main menu
      Open inventory    -> Inventory menu (terminal)
      Explore dungeons  -> Dungeon menu (terminal)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rpg_adventure.core.constants import TRAINING_COST, TRAINING_STAMINA_COST
from rpg_adventure.core.logging import get_logger
from rpg_adventure.core.validation import (
    sanitize_input,
    validate_character_name,
    validate_menu_choice,
    validate_save_name,
)
from rpg_adventure.models.factories import available_character_classes, create_character
from rpg_adventure.models.inventory import (
    InventorySortStrategy,
    SortByCategory,
    SortByName,
    SortByValue,
)
from rpg_adventure.ui.menu import GameMenu, MenuItem, NavigationSignal


if TYPE_CHECKING:
    from rpg_adventure.models.character import Character
    from rpg_adventure.models.dungeon import DungeonDescriptor
    from rpg_adventure.ui.session import GameSession

logger = get_logger(__name__)

MAIN_MENU_TITLE = "RPG Adventure Game - Main Menu"


# =============================================================================
# Main Menu
# =============================================================================


def build_main_menu(session: GameSession) -> GameMenu:
    """Root menu: create or load a character."""
    menu = GameMenu(
        MAIN_MENU_TITLE,
        session.console,
        is_root=True,
        pause_after_action=session.pause_after_action,
    )
    menu.add(MenuItem("Create new character", lambda: create_new_character(session)))
    menu.add(MenuItem("Load character", lambda: load_character(session)))
    return menu


def create_new_character(session: GameSession) -> NavigationSignal | None:
    console = session.console
    console.title("CREATE NEW CHARACTER")
    console.emit("Available character types:")
    console.emit_lines(available_character_classes())
    console.emit()

    kind = sanitize_input(console.read_line("Type (warrior/mage): "))
    name_result = validate_character_name(console.read_line("Name: "))
    if not name_result.ok:
        console.emit(name_result.error or "Invalid name!")
        return None

    character = create_character(kind, name_result.value, dice=session.dice)
    if character is None:
        console.emit("Invalid character type!")
        console.emit("Creation failed!")
        return None

    console.emit(f"Character created: {character.name}")
    return enter_character_menu(session, character)


def load_character(session: GameSession) -> NavigationSignal | None:
    console = session.console
    console.title("LOAD CHARACTER")

    saves = session.repository.list_saves()
    if not saves:
        console.emit("No saves found!")
        return None

    console.emit("Available saves:")
    for index, name in enumerate(saves, start=1):
        console.emit(f"{index}. {name}")

    result = validate_menu_choice(console.read_line(f"Choose (1-{len(saves)}, 0 to cancel): "), len(saves))
    if not result.ok:
        console.emit(result.error or "Invalid choice!")
        return None
    if result.value == 0:
        return None

    character = session.repository.load(saves[result.value - 1])
    if character is None:
        console.emit("Could not load the save!")
        return None

    character.dice = session.dice
    console.emit(f"Character loaded: {character.name}")
    return enter_character_menu(session, character)


# =============================================================================
# Character Menu
# =============================================================================


def enter_character_menu(session: GameSession, character: Character) -> NavigationSignal:
    """Run the character menu. A dead character goes straight back to the main menu."""
    if not character.is_alive:
        logger.warning("Character is dead, returning to main menu", character=character.name)
        session.console.emit("Your character is dead! Returning to the main menu.")
        return NavigationSignal.RETURN_TO_ROOT
    return build_character_menu(session, character).execute()


def build_character_menu(session: GameSession, character: Character) -> GameMenu:
    menu = GameMenu(
        f"Character Menu - {character.name}",
        session.console,
        terminal=True,
        pause_after_action=session.pause_after_action,
    )
    menu.add(MenuItem("Train", lambda: train_character(session, character)))
    menu.add(MenuItem("Rest", lambda: rest_character(session, character)))
    menu.add(build_inventory_menu(session, character))
    menu.add(build_dungeon_menu(session, character))
    menu.add(MenuItem("Save", lambda: save_character(session, character)))
    menu.add(MenuItem("Back to main menu", lambda: return_to_main(character)))
    return menu


def train_character(session: GameSession, character: Character) -> None:
    console = session.console
    console.title("TRAINING")
    console.emit(f"Character: {character}")

    if character.stamina < TRAINING_STAMINA_COST:
        console.emit(f"Not enough stamina to train! (At least {TRAINING_STAMINA_COST} needed)")
        return

    old_damage = character.base_damage
    if not character.train():
        console.emit(f"Not enough money to train! (Training costs {TRAINING_COST} gold)")
        return

    character.restore_stamina(-TRAINING_STAMINA_COST)
    console.emit("Training complete!")
    console.emit(f"Damage increased from {old_damage} to {character.base_damage}")
    console.emit(
        f"Stamina spent: -{TRAINING_STAMINA_COST} (Current stamina: {character.stamina})"
    )


def rest_character(session: GameSession, character: Character) -> None:
    console = session.console
    console.title("REST")
    console.emit(f"Current status: {character}")

    if character.is_fully_rested:
        console.emit("You are already fully rested!")
        return

    old_stamina = character.stamina
    character.rest()
    console.emit("Rest complete!")
    console.emit(f"Stamina recovered: +{character.stamina - old_stamina}")


def save_character(session: GameSession, character: Character) -> NavigationSignal | None:
    console = session.console
    console.title("SAVE")

    result = validate_save_name(console.read_line("Save name: "))
    if not result.ok:
        console.emit(result.error or "Invalid save name!")
        return None

    if not session.repository.save(character, result.value):
        console.emit("Error while saving!")
        return None

    console.emit("Character saved!")
    return NavigationSignal.RETURN_TO_ROOT


def return_to_main(character: Character) -> NavigationSignal:
    logger.info("Player returned to main menu", character=character.name)
    return NavigationSignal.RETURN_TO_ROOT


# =============================================================================
# Inventory Menu
# =============================================================================


def build_inventory_menu(session: GameSession, character: Character) -> GameMenu:
    menu = GameMenu(
        f"Inventory - {character.name}",
        session.console,
        label="Open inventory",
        terminal=True,
        pause_after_action=session.pause_after_action,
    )
    menu.add(MenuItem("Show all items", lambda: show_all_items(session, character)))
    menu.add(
        MenuItem(
            "Show items by category",
            lambda: show_items(session, character, SortByCategory(), "ITEMS BY CATEGORY"),
        )
    )
    menu.add(
        MenuItem(
            "Show items by value",
            lambda: show_items(session, character, SortByValue(), "ITEMS BY VALUE"),
        )
    )
    menu.add(
        MenuItem(
            "Show items by name",
            lambda: show_items(session, character, SortByName(), "ITEMS BY NAME"),
        )
    )
    menu.add(MenuItem("Equip an item", lambda: equip_item(session, character)))
    menu.add(MenuItem("Back to character menu", lambda: NavigationSignal.UNWIND))
    return menu


def show_all_items(session: GameSession, character: Character) -> None:
    session.console.emit()
    session.console.emit_lines(character.show_inventory())


def show_items(
    session: GameSession,
    character: Character,
    strategy: InventorySortStrategy,
    title: str,
) -> None:
    console = session.console
    console.title(title)

    inventory = character.inventory
    if inventory.is_empty:
        console.emit("The inventory is empty.")
        return

    items = inventory.sorted_view(strategy)
    logger.info("Inventory listed", character=character.name, strategy=strategy.name)

    if isinstance(strategy, SortByCategory):
        for category, members in inventory.group_by_category().items():
            console.emit()
            console.emit(f"{category.plural_name.upper()}:")
            for item in members:
                bonus = f" (+{item.stat_bonus})" if item.stat_bonus > 0 else ""
                console.emit(f"  - {item.name} - {item.value} gold{bonus}")
        console.emit()
        console.emit(f"Total items: {inventory.size}")
    else:
        console.emit(f"Items in inventory: {len(items)}")
        for index, item in enumerate(items, start=1):
            console.emit(
                f"{index}. {item.name} [{item.category.display_name}] - Value: {item.value} gold"
            )
        console.emit()
    console.emit(f"Total value: {inventory.total_value()} gold")


def equip_item(session: GameSession, character: Character) -> None:
    console = session.console
    console.title("EQUIP")

    candidates = character.inventory.equippable_items()
    if not candidates:
        console.emit("You have nothing to equip.")
        return

    for index, item in enumerate(candidates, start=1):
        marker = " [EQUIPPED]" if character.inventory.is_equipped(item) else ""
        console.emit(f"{index}. {item}{marker}")

    result = validate_menu_choice(
        console.read_line(f"Choose (1-{len(candidates)}, 0 to cancel): "),
        len(candidates),
    )
    if not result.ok:
        console.emit(result.error or "Invalid choice!")
        return
    if result.value == 0:
        return

    item = candidates[result.value - 1]
    if character.equip_item(item):
        console.emit(f"Equipped {item.name}!")
        console.emit(f"Total damage: {character.total_damage}")
    else:
        console.emit(f"Could not equip {item.name}.")


# =============================================================================
# Dungeon Menu
# =============================================================================


def build_dungeon_menu(session: GameSession, character: Character) -> GameMenu:
    menu = GameMenu(
        "Explore Dungeons",
        session.console,
        label="Explore dungeons",
        terminal=True,
        pause_after_action=session.pause_after_action,
    )
    for dungeon in session.dungeons:
        menu.add(MenuItem(dungeon.name, _explore_action(session, character, dungeon)))
    menu.add(MenuItem("Back to character menu", lambda: NavigationSignal.UNWIND))
    return menu


def _explore_action(session: GameSession, character: Character, dungeon: DungeonDescriptor):
    return lambda: explore_dungeon(session, character, dungeon)


def explore_dungeon(
    session: GameSession,
    character: Character,
    dungeon: DungeonDescriptor,
) -> NavigationSignal | None:
    """Fight in a dungeon. A defeat sends the player back to the main menu."""
    console = session.console
    console.title(dungeon.name.upper())

    if not character.is_alive:
        console.emit("Your character is dead! Returning to the main menu.")
        return NavigationSignal.RETURN_TO_ROOT

    result = session.explorer.explore(character, dungeon)
    if not character.is_alive:
        console.emit("Returning to the main menu.")
        return NavigationSignal.RETURN_TO_ROOT
    if not result.victorious:
        logger.info("Exploration ended without a winner", outcome=result.outcome)
    return None


__all__ = [
    "MAIN_MENU_TITLE",
    "build_main_menu",
    "build_character_menu",
    "build_inventory_menu",
    "build_dungeon_menu",
    "enter_character_menu",
    "create_new_character",
    "load_character",
    "train_character",
    "rest_character",
    "save_character",
    "show_all_items",
    "show_items",
    "equip_item",
    "explore_dungeon",
]
