"""Stamina recovery and its observers.

The recovery system is owned by one game session. After a won fight
the explorer asks it to restore stamina; it then tells every registered
observer what changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rpg_adventure.core.constants import STAMINA_RECOVERY_AMOUNT
from rpg_adventure.core.logging import get_logger


if TYPE_CHECKING:
    from rpg_adventure.models.character import Character
    from rpg_adventure.ui.console import GameConsole

logger = get_logger(__name__)


@runtime_checkable
class StaminaObserver(Protocol):
    """Receives stamina notifications from a StaminaRecoverySystem."""

    def on_stamina_changed(self, character: Character, old_value: int, new_value: int) -> None: ...

    def on_stamina_recovered(self, character: Character, amount: int) -> None: ...


class StaminaRecoverySystem:
    """Restores stamina after victories and notifies observers.

    Example:
        >>> recovery = StaminaRecoverySystem()
        >>> recovery.add_observer(ConsoleStaminaObserver(console))
        >>> recovery.recover_stamina(hero)
        10
    """

    def __init__(self, recovery_amount: int = STAMINA_RECOVERY_AMOUNT) -> None:
        self._recovery_amount = recovery_amount
        self._observers: list[StaminaObserver] = []

    @property
    def recovery_amount(self) -> int:
        return self._recovery_amount

    @property
    def observers(self) -> tuple[StaminaObserver, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: StaminaObserver) -> None:
        """Register an observer. Registering it twice has no effect."""
        if any(existing is observer for existing in self._observers):
            return
        self._observers.append(observer)
        logger.debug("Stamina observer added", observer=type(observer).__name__)

    def remove_observer(self, observer: StaminaObserver) -> None:
        """Unregister an observer. Unknown observers are ignored."""
        self._observers = [existing for existing in self._observers if existing is not observer]

    def recover_stamina(self, character: Character) -> int:
        """Restore a fixed amount of stamina to a living character.

        Observers are notified in registration order. An observer that
        raises is logged and skipped.

        Returns:
            Stamina actually gained (0 for a dead character).
        """
        if not character.is_alive:
            logger.debug("Stamina recovery skipped, character is dead", character=character.name)
            return 0

        old_value = character.stamina
        gained = character.restore_stamina(self._recovery_amount)
        new_value = character.stamina
        logger.info(
            "Stamina recovered",
            character=character.name,
            old=old_value,
            new=new_value,
        )

        for observer in self.observers:
            if new_value != old_value:
                self._notify(observer.on_stamina_changed, character, old_value, new_value)
            self._notify(observer.on_stamina_recovered, character, self._recovery_amount)
        return gained

    def _notify(self, callback, *args) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception("Stamina observer failed", callback=getattr(callback, "__qualname__", repr(callback)))


class ConsoleStaminaObserver:
    """Reports stamina notifications on the game console."""

    def __init__(self, console: GameConsole) -> None:
        self._console = console

    def on_stamina_changed(self, character: Character, old_value: int, new_value: int) -> None:
        self._console.emit(f"[UI] {character.name} stamina increased by {new_value - old_value}")

    def on_stamina_recovered(self, character: Character, amount: int) -> None:
        self._console.emit(f"[UI] {character.name} recovers {amount} stamina")


__all__ = [
    "StaminaObserver",
    "StaminaRecoverySystem",
    "ConsoleStaminaObserver",
]
