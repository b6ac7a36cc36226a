"""Menu navigation tree.

Menus form a tree of composite ``GameMenu`` nodes and leaf ``MenuItem``
actions. Navigation is carried by the value ``execute()`` returns, so a
leaf deep in the tree can send the player back to the main menu without
raising anything:

* ``CONTINUE``: stay where you are (the menu redraws itself).
* ``UNWIND``: leave the menu that owns this leaf.
* ``RETURN_TO_ROOT``: leave every menu up to the main menu.
* ``EXIT``: quit the game.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING

from rpg_adventure.core.exceptions import InputClosedError
from rpg_adventure.core.logging import get_logger
from rpg_adventure.core.validation import validate_menu_choice


if TYPE_CHECKING:
    from rpg_adventure.ui.console import GameConsole

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class NavigationSignal(StrEnum):
    """Where control goes after a menu node finishes."""

    CONTINUE = "continue"
    UNWIND = "unwind"
    RETURN_TO_ROOT = "return_to_root"
    EXIT = "exit"


MenuAction = Callable[[], "NavigationSignal | None"]


class MenuComponent(ABC):
    """A node of the menu tree."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Text shown for this node in its parent's option list."""

    @abstractmethod
    def execute(self) -> NavigationSignal:
        """Run the node and report where control goes next."""


class MenuItem(MenuComponent):
    """Leaf node bound to an action.

    The action may return a NavigationSignal; returning None means
    ``CONTINUE``.
    """

    def __init__(self, name: str, action: MenuAction | None = None) -> None:
        self.name = name
        self._action = action

    @property
    def label(self) -> str:
        return self.name

    def execute(self) -> NavigationSignal:
        if self._action is None:
            return NavigationSignal.CONTINUE
        signal = self._action()
        return NavigationSignal.CONTINUE if signal is None else NavigationSignal(signal)

    def __repr__(self) -> str:
        return f"MenuItem({self.name!r})"


class GameMenu(MenuComponent):
    """Composite node: a numbered list of child nodes.

    Option 0 leaves the menu ("Back"), or quits the game on the root
    menu ("Exit"). Terminal menus offer no option 0; their children
    provide every way out.

    Args:
        title: Heading shown above the options.
        console: Console used for display and input.
        label: Text shown in the parent menu. Defaults to the title.
        terminal: Hide and refuse option 0.
        is_root: Option 0 exits the game.
        pause_after_action: Wait for Enter after a leaf action finishes.
    """

    def __init__(
        self,
        title: str,
        console: GameConsole,
        *,
        label: str | None = None,
        terminal: bool = False,
        is_root: bool = False,
        pause_after_action: bool = False,
    ) -> None:
        self.title = title
        self._label = label or title
        self._console = console
        self.terminal = terminal
        self.is_root = is_root
        self.pause_after_action = pause_after_action
        self._children: list[MenuComponent] = []

    @property
    def label(self) -> str:
        return self._label

    @property
    def children(self) -> tuple[MenuComponent, ...]:
        return tuple(self._children)

    def add(self, component: MenuComponent) -> GameMenu:
        self._children.append(component)
        return self

    def remove(self, component: MenuComponent) -> None:
        """Remove a child. Unknown components are ignored."""
        self._children = [child for child in self._children if child is not component]

    def option_lines(self) -> list[str]:
        lines = [f"{index}. {child.label}" for index, child in enumerate(self._children, start=1)]
        if not self.terminal:
            lines.append("0. Exit" if self.is_root else "0. Back")
        return lines

    def display(self) -> None:
        self._console.title(self.title.upper())
        self._console.emit_lines(self.option_lines())

    def execute(self) -> NavigationSignal:
        """Show the menu and handle choices until the player leaves it."""
        while True:
            self.display()
            try:
                raw = self._console.read_line("Your choice: ")
            except InputClosedError:
                return NavigationSignal.EXIT

            result = validate_menu_choice(raw, len(self._children), allow_zero=not self.terminal)
            if not result.ok:
                self._console.emit(result.error or "Invalid choice!")
                self._console.emit("Invalid choice! Please try again.")
                continue

            choice = result.value
            if choice == 0:
                logger.debug("Menu left", menu=self.title, is_root=self.is_root)
                return NavigationSignal.EXIT if self.is_root else NavigationSignal.CONTINUE

            child = self._children[choice - 1]
            signal = self._run_child(child)

            if signal is NavigationSignal.UNWIND:
                return NavigationSignal.CONTINUE
            if signal in (NavigationSignal.RETURN_TO_ROOT, NavigationSignal.EXIT):
                logger.debug("Navigation signal propagated", menu=self.title, signal=signal)
                return signal

            if self.pause_after_action and isinstance(child, MenuItem):
                try:
                    self._console.pause()
                except InputClosedError:
                    return NavigationSignal.EXIT

    def _run_child(self, child: MenuComponent) -> NavigationSignal:
        try:
            return child.execute()
        except InputClosedError:
            return NavigationSignal.EXIT
        except Exception:
            logger.exception("Menu action failed", menu=self.title, option=child.label)
            self._console.emit(UNEXPECTED_ERROR_MESSAGE)
            return NavigationSignal.CONTINUE

    def __repr__(self) -> str:
        return f"GameMenu({self.title!r}, children={len(self._children)})"


__all__ = [
    "NavigationSignal",
    "MenuAction",
    "MenuComponent",
    "MenuItem",
    "GameMenu",
    "UNEXPECTED_ERROR_MESSAGE",
]
