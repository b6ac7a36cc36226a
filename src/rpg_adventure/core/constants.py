"""Game-wide constants for the RPG Adventure game.

Numeric rules of the character, monster and recovery systems live
here so the models, the menus and the tests agree on them.
"""

from __future__ import annotations

# =============================================================================
# Character Rules
# =============================================================================

STARTING_MONEY = 100
"""Gold every new character starts with."""

STARTING_LEVEL = 1
"""Level every new character starts at."""

TRAINING_COST = 50
"""Gold spent by a single training session."""

TRAINING_STAMINA_COST = 10
"""Stamina the training screen requires and spends on success."""

WARRIOR_ATTACK_STAMINA = 5
"""Stamina a Warrior needs and spends per attack."""

MAGE_ATTACK_STAMINA = 3
"""Stamina a Mage needs and spends per attack."""

MAGE_SPELL_MANA = 10
"""Mana consumed by an empowered Mage spell."""

DEFAULT_CHARACTER_NAME = "Unknown"
"""Name given to characters created with a blank name."""

MIN_NAME_LENGTH = 2
"""Shortest accepted character name."""

MAX_NAME_LENGTH = 20
"""Longest accepted character name."""

# =============================================================================
# Monster Rules
# =============================================================================

MONSTER_DAMAGE_VARIANCE = 0.2
"""Monster damage varies uniformly by this fraction of base damage."""

MIN_DAMAGE = 1
"""Floor applied to every damage roll that is not suppressed."""

# =============================================================================
# Recovery
# =============================================================================

STAMINA_RECOVERY_AMOUNT = 10
"""Stamina restored after every victorious encounter."""

# =============================================================================
# Persistence
# =============================================================================

MAX_SAVE_NAME_LENGTH = 30
"""Longest accepted save slot name."""


__all__ = [
    # Character
    "STARTING_MONEY",
    "STARTING_LEVEL",
    "TRAINING_COST",
    "TRAINING_STAMINA_COST",
    "WARRIOR_ATTACK_STAMINA",
    "MAGE_ATTACK_STAMINA",
    "MAGE_SPELL_MANA",
    "DEFAULT_CHARACTER_NAME",
    "MIN_NAME_LENGTH",
    "MAX_NAME_LENGTH",
    # Monster
    "MONSTER_DAMAGE_VARIANCE",
    "MIN_DAMAGE",
    # Recovery
    "STAMINA_RECOVERY_AMOUNT",
    # Persistence
    "MAX_SAVE_NAME_LENGTH",
]
