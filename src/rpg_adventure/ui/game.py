"""Top-level game manager.

Wires the session collaborators together and runs the main menu until
the player quits. A ``RETURN_TO_ROOT`` signal coming out of the main
menu restarts it; ``EXIT`` ends the game.
"""

from __future__ import annotations

from rpg_adventure.core.config import Settings
from rpg_adventure.core.exceptions import InvalidGameStateError
from rpg_adventure.core.logging import get_logger
from rpg_adventure.engine.combat import CombatResolver
from rpg_adventure.engine.dice import DiceRoller
from rpg_adventure.engine.explorer import DungeonExplorer
from rpg_adventure.engine.observer import ConsoleStaminaObserver, StaminaRecoverySystem
from rpg_adventure.models.factories import create_monster
from rpg_adventure.storage.saves import CharacterRepository, SaveStore
from rpg_adventure.ui.console import GameConsole
from rpg_adventure.ui.menu import NavigationSignal
from rpg_adventure.ui.screens import build_main_menu
from rpg_adventure.ui.session import GameSession


logger = get_logger(__name__)

RETURNED_TO_MAIN_MESSAGE = "--- Returned to the main menu ---"
FAREWELL_MESSAGE = "Thanks for playing!"


class GameManager:
    """Owns one game session and its root loop.

    Args:
        session: Fully wired session collaborators.

    Example:
        >>> manager = GameManager.from_settings(get_settings())
        >>> manager.run()
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self._running = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        console: GameConsole | None = None,
        repository: CharacterRepository | None = None,
        dice: DiceRoller | None = None,
    ) -> GameManager:
        """Build a manager whose collaborators follow the settings."""
        dice = dice or DiceRoller(seed=settings.game.rng_seed)
        console = console or GameConsole(pause_enabled=settings.game.pause_after_action)
        if repository is None:
            repository = SaveStore(settings.storage.database_path, dice=dice)

        recovery = StaminaRecoverySystem()
        recovery.add_observer(ConsoleStaminaObserver(console))

        explorer = DungeonExplorer(
            CombatResolver(console),
            recovery,
            console,
            lambda kind: create_monster(kind, dice=dice),
            max_rounds=settings.game.max_combat_rounds,
        )
        session = GameSession(
            console=console,
            dice=dice,
            repository=repository,
            recovery=recovery,
            explorer=explorer,
            pause_after_action=settings.game.pause_after_action,
        )
        return cls(session)

    def run(self) -> None:
        """Run the main menu until the player exits.

        Raises:
            InvalidGameStateError: If the game is already running.
        """
        if self._running:
            raise InvalidGameStateError("The game is already running", current_state="running")

        self._running = True
        console = self.session.console
        logger.info("Game started")
        try:
            console.title("RPG ADVENTURE GAME")
            console.emit("A text role-playing game")

            while True:
                signal = build_main_menu(self.session).execute()
                if signal is NavigationSignal.RETURN_TO_ROOT:
                    logger.info("Returned to main menu")
                    console.emit()
                    console.emit(RETURNED_TO_MAIN_MESSAGE)
                    continue
                break

            console.emit()
            console.emit(FAREWELL_MESSAGE)
            logger.info("Game ended normally")
        finally:
            self._running = False


__all__ = [
    "GameManager",
    "RETURNED_TO_MAIN_MESSAGE",
    "FAREWELL_MESSAGE",
]
