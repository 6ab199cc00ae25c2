"""Enumeration types for the party manager."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class LevelType(StrEnum):
    """Experience growth rates.

    Each species belongs to one growth rate, which selects the leveling
    curve used to turn accumulated experience into a level.
    """

    ERRATIC = "erratic"
    FAST = "fast"
    MEDIUM_FAST = "medium_fast"
    MEDIUM_SLOW = "medium_slow"
    SLOW = "slow"
    FLUCTUATING = "fluctuating"


class StoneType(StrEnum):
    """Evolution stones that can satisfy a stone evolution."""

    FIRE_STONE = "Fire_stone"
    WATER_STONE = "Water_stone"
    THUNDER_STONE = "Thunder_stone"
    LEAF_STONE = "Leaf_stone"
    MOON_STONE = "Moon_stone"
    SUN_STONE = "Sun_stone"
    SHINY_STONE = "Shiny_stone"
    DUSK_STONE = "Dusk_stone"
    DAWN_STONE = "Dawn_stone"
    ICE_STONE = "Ice_stone"


class Region(IntEnum):
    """Regions in the order the player reaches them."""

    KANTO = 0
    JOHTO = 1
    HOENN = 2
    SINNOH = 3
    UNOVA = 4
    KALOS = 5
    ALOLA = 6
    GALAR = 7


class NotificationType(StrEnum):
    """Severity of a notice shown to the player."""

    PRIMARY = "primary"
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


__all__ = [
    "LevelType",
    "StoneType",
    "Region",
    "NotificationType",
]
