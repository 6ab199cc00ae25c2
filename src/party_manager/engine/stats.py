"""Attack calculation.

The attack of a party creature is derived from its species' base attack,
its permanent bonuses, its level and the held item it carries. The
calculation is pure so it can be reused for previews (e.g. the attack a
creature would have at level 100) without touching any state.
"""

from __future__ import annotations

import math


def calculate_attack(
    base_attack: int,
    bonus_percent: float,
    bonus_amount: float,
    level: int,
    item_multiplier: float = 1.0,
    *,
    ignore_level: bool = False,
) -> int:
    """Calculate a creature's attack.

    ``(base * (1 + percent / 100) + amount) * level / 100 * item``, floored,
    and never lower than 1.

    Args:
        base_attack: Species base attack.
        bonus_percent: Permanent percentage bonus.
        bonus_amount: Permanent flat bonus.
        level: Current level.
        item_multiplier: Multiplier from the held item (1 without one).
        ignore_level: Treat the creature as if it were level 100.

    Returns:
        The attack value.

    Example:
        >>> calculate_attack(50, 10, 5, 100)
        60
    """
    bonus_multiplier = 1 + bonus_percent / 100
    level_multiplier = 1 if ignore_level else level / 100
    return max(
        1,
        math.floor((base_attack * bonus_multiplier + bonus_amount) * level_multiplier * item_multiplier),
    )


__all__ = ["calculate_attack"]
