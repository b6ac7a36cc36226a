"""Random source for combat and loot.

Damage variance and drop rolls all go through a DiceRoller that is
constructed once per session and handed to every character and monster.
Seeding it (or substituting a subclass) makes fights reproducible.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum

from rpg_adventure.core.exceptions import GameEngineError
from rpg_adventure.core.logging import get_logger


logger = get_logger(__name__)


class RollType(StrEnum):
    """What a roll was made for."""

    DAMAGE = "damage"
    VARIANCE = "variance"
    DROP = "drop"


@dataclass(frozen=True)
class RollRecord:
    """A single roll, kept when history recording is enabled.

    Attributes:
        roll_type: What the roll was made for.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        result: The rolled value.
    """

    roll_type: RollType
    low: int
    high: int
    result: int


class DiceRoller:
    """Injectable random source.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> 0 <= roller.randint(0, 4) <= 4
        True
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        record_history: bool = False,
    ) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional seed for reproducible rolls.
            rng: Optional pre-built random generator; wins over ``seed``.
            record_history: Keep a RollRecord for every roll.
        """
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        self._record_history = record_history
        self._history: list[RollRecord] = []
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def history(self) -> list[RollRecord]:
        """Rolls made so far (empty unless history recording is on)."""
        return self._history.copy()

    def randint(self, low: int, high: int, *, roll_type: RollType = RollType.DAMAGE) -> int:
        """Roll an integer uniformly in ``[low, high]``.

        Raises:
            GameEngineError: If ``low`` is greater than ``high``.
        """
        if low > high:
            raise GameEngineError(
                "Invalid roll bounds",
                details={"low": low, "high": high},
            )
        result = self._roll(low, high)
        if self._record_history:
            self._history.append(RollRecord(roll_type, low, high, result))
        return result

    def _roll(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def bonus(self, spread: int) -> int:
        """Roll a non-negative damage bonus below ``spread``."""
        if spread <= 0:
            return 0
        return self.randint(0, spread - 1, roll_type=RollType.DAMAGE)

    def variation(self, variance: int) -> int:
        """Roll a symmetric variation in ``[-variance, variance]``."""
        return self.randint(-variance, variance, roll_type=RollType.VARIANCE)

    def chance(self, percent: int) -> bool:
        """Succeed with probability ``percent`` / 100.

        A percent of 0 never succeeds and 100 always does.
        """
        return self.randint(0, 99, roll_type=RollType.DROP) < percent


__all__ = [
    "RollType",
    "RollRecord",
    "DiceRoller",
]
