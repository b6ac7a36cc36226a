"""Console user interface for RPG Adventure.

Submodules:
    console: rich-backed line presenter and input reader
    menu: Menu navigation tree and navigation signals
    session: Collaborators shared by the screens
    screens: Main, character, inventory and dungeon menus
    game: Game manager running the main menu loop
"""

from __future__ import annotations

from rpg_adventure.ui.console import GameConsole
from rpg_adventure.ui.menu import GameMenu, MenuComponent, MenuItem, NavigationSignal
from rpg_adventure.ui.session import GameSession
from rpg_adventure.ui.game import GameManager


__all__ = [
    "GameConsole",
    "GameMenu",
    "MenuComponent",
    "MenuItem",
    "NavigationSignal",
    "GameSession",
    "GameManager",
]
