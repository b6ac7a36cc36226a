"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the RPG Adventure test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING, Any

import pytest

from rpg_adventure.engine.dice import DiceRoller


if TYPE_CHECKING:
    from collections.abc import Generator

    from rpg_adventure.ui.console import GameConsole


# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedDice(DiceRoller):
    """DiceRoller that returns queued results.

    Once the queue is empty every roll returns ``default`` clamped to the
    requested range, or the lowest possible value when no default is set.
    """

    def __init__(self, values: Iterable[int] = (), *, default: int | None = None) -> None:
        super().__init__(seed=0, record_history=True)
        self._queue = list(values)
        self._default = default

    def queue(self, *values: int) -> None:
        self._queue.extend(values)

    def _roll(self, low: int, high: int) -> int:
        if self._queue:
            return self._queue.pop(0)
        if self._default is None:
            return low
        return max(low, min(high, self._default))


class ScriptedInput:
    """Input function fed from a list of lines; EOF once exhausted."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@dataclass
class ConsoleHarness:
    """A GameConsole wired to scripted input and captured output."""

    console: GameConsole
    input: ScriptedInput
    buffer: StringIO = field(repr=False)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from rpg_adventure.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def isolated_env(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Run in an empty directory with no RPG_ADVENTURE_* variables set.

    Returns:
        The temporary working directory.
    """
    import os

    for key in list(os.environ):
        if key.startswith("RPG_ADVENTURE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def make_dice() -> Callable[..., ScriptedDice]:
    """Factory for ScriptedDice instances.

    Returns:
        Callable taking the queued roll results and an optional default.
    """

    def factory(*values: int, default: int | None = None) -> ScriptedDice:
        return ScriptedDice(values, default=default)

    return factory


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def make_console() -> Callable[..., ConsoleHarness]:
    """Factory for consoles fed with scripted input lines."""
    from rpg_adventure.ui.console import GameConsole

    def factory(*lines: str, pause_enabled: bool = False) -> ConsoleHarness:
        buffer = StringIO()
        scripted = ScriptedInput(lines)
        console = GameConsole(scripted, buffer, pause_enabled=pause_enabled)
        return ConsoleHarness(console=console, input=scripted, buffer=buffer)

    return factory


@pytest.fixture
def harness(make_console: Callable[..., ConsoleHarness]) -> ConsoleHarness:
    """Console with no scripted input (any read raises InputClosedError)."""
    return make_console()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def club() -> Any:
    from rpg_adventure.models import Item, ItemCategory

    return Item(name="Club", category=ItemCategory.WEAPON, value=50, stat_bonus=3)


@pytest.fixture
def sword() -> Any:
    from rpg_adventure.models import Item, ItemCategory

    return Item(name="Sword", category=ItemCategory.WEAPON, value=100, stat_bonus=5)


@pytest.fixture
def leather_armor() -> Any:
    from rpg_adventure.models import Item, ItemCategory

    return Item(name="Leather Armor", category=ItemCategory.ARMOR, value=40, stat_bonus=2)


@pytest.fixture
def health_potion() -> Any:
    from rpg_adventure.models import Item, ItemCategory

    return Item(name="Health Potion", category=ItemCategory.POTION, value=15, stat_bonus=0)


@pytest.fixture
def gem() -> Any:
    from rpg_adventure.models import Item, ItemCategory

    return Item(name="Gem", category=ItemCategory.MISC, value=75, stat_bonus=0)


@pytest.fixture
def warrior(dice_roller: DiceRoller) -> Any:
    """A fresh level 1 Warrior named Aria."""
    from rpg_adventure.models import Warrior

    return Warrior(name="Aria", dice=dice_roller)


@pytest.fixture
def mage(dice_roller: DiceRoller) -> Any:
    """A fresh level 1 Mage named Merlin."""
    from rpg_adventure.models import Mage

    return Mage(name="Merlin", dice=dice_roller)


@pytest.fixture
def goblin(dice_roller: DiceRoller) -> Any:
    from rpg_adventure.models import Goblin

    return Goblin(dice=dice_roller)


@pytest.fixture
def troll(dice_roller: DiceRoller) -> Any:
    from rpg_adventure.models import Troll

    return Troll(dice=dice_roller)


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def save_store(tmp_path: Any) -> Any:
    """SaveStore backed by a database in a temporary directory."""
    from rpg_adventure.storage import SaveStore

    return SaveStore(tmp_path / "saves" / "test.db")


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def make_session(
    make_console: Callable[..., ConsoleHarness],
    make_dice: Callable[..., ScriptedDice],
    save_store: Any,
) -> Callable[..., tuple[Any, ConsoleHarness]]:
    """Factory for game sessions driven by scripted input.

    Returns:
        Callable taking the input lines plus optional ``dice`` and
        ``monster`` (a fixed monster for every encounter), returning the
        session and its console harness.
    """
    from rpg_adventure.engine import (
        CombatResolver,
        ConsoleStaminaObserver,
        DungeonExplorer,
        StaminaRecoverySystem,
    )
    from rpg_adventure.models import create_monster
    from rpg_adventure.ui.session import GameSession

    def factory(
        *lines: str,
        dice: DiceRoller | None = None,
        monster: Any = None,
    ) -> tuple[GameSession, ConsoleHarness]:
        h = make_console(*lines)
        roller = dice or make_dice()
        recovery = StaminaRecoverySystem()
        recovery.add_observer(ConsoleStaminaObserver(h.console))

        def spawn(kind: str) -> Any:
            return monster if monster is not None else create_monster(kind, dice=roller)

        explorer = DungeonExplorer(CombatResolver(h.console), recovery, h.console, spawn)
        session = GameSession(
            console=h.console,
            dice=roller,
            repository=save_store,
            recovery=recovery,
            explorer=explorer,
            pause_after_action=False,
        )
        return session, h

    return factory
