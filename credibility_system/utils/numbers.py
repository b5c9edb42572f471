"""Rounding and clamping helpers shared by the scoring code."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float = 0, upper: float = 100) -> float:
    """Bound ``value`` to [lower, upper]."""
    return max(lower, min(upper, value))
