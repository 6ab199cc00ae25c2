"""Leveling curves and level derivation.

Every species levels along one of six growth rates. A growth rate's
curve is a list where entry ``i`` holds the cumulative experience needed
to reach level ``i + 1``. Curves run one entry past the maximum level so
that the last real level is reachable. Experience at or beyond the final
entry gives the last real level.

Experience is the single source of truth. Levels are never stored, only
derived from experience with ``level_from_exp``.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from party_manager.models.enums import LevelType


DEFAULT_MAX_LEVEL = 100


# =============================================================================
# Growth Rate Formulas
# =============================================================================


def _erratic(n: int) -> float:
    if n < 50:
        return n**3 * (100 - n) / 50
    if n < 68:
        return n**3 * (150 - n) / 100
    if n < 98:
        return n**3 * ((1911 - 10 * n) // 3) / 500
    return n**3 * (160 - n) / 100


def _fluctuating(n: int) -> float:
    if n < 15:
        return n**3 * ((n + 1) // 3 + 24) / 50
    if n < 36:
        return n**3 * (n + 14) / 50
    return n**3 * (n // 2 + 32) / 50


_GROWTH_FORMULAS = {
    LevelType.ERRATIC: _erratic,
    LevelType.FAST: lambda n: 4 * n**3 / 5,
    LevelType.MEDIUM_FAST: lambda n: n**3,
    LevelType.MEDIUM_SLOW: lambda n: 6 * n**3 / 5 - 15 * n**2 + 100 * n - 140,
    LevelType.SLOW: lambda n: 5 * n**3 / 4,
    LevelType.FLUCTUATING: _fluctuating,
}


@lru_cache(maxsize=None)
def build_level_requirements(
    level_type: LevelType,
    max_level: int = DEFAULT_MAX_LEVEL,
) -> tuple[int, ...]:
    """Build the experience curve for a growth rate.

    Args:
        level_type: The growth rate.
        max_level: Highest reachable level.

    Returns:
        ``max_level + 1`` cumulative thresholds, starting at 0 and never
        decreasing.
    """
    formula = _GROWTH_FORMULAS[LevelType(level_type)]
    requirements: list[int] = [0]
    for level in range(2, max_level + 2):
        # Some formulas dip below the previous level or below zero
        requirements.append(max(requirements[-1], int(formula(level))))
    return tuple(requirements)


# =============================================================================
# Level Derivation
# =============================================================================


def level_from_exp(requirements: Sequence[int], exp: float, current_level: int = 1) -> int:
    """Derive the level implied by accumulated experience.

    The scan starts at the current level, so a level never goes down as
    long as experience only grows. Experience beyond every threshold
    gives the last level of the curve.

    Args:
        requirements: Cumulative thresholds for the creature's growth rate.
        exp: Accumulated experience.
        current_level: The level to resume scanning from.

    Returns:
        The derived level (at least 1).

    Example:
        >>> level_from_exp((0, 100, 250, 500), 110)
        2
    """
    for index in range(max(current_level, 1) - 1, len(requirements)):
        if requirements[index] > exp:
            return max(index, 1)
    return max(current_level, len(requirements) - 1)


__all__ = [
    "DEFAULT_MAX_LEVEL",
    "build_level_requirements",
    "level_from_exp",
]
