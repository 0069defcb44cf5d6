"""
wheel.py.

Does: Small numeric helpers for color-wheel arithmetic: rounding, guarded
      division and hue wrapping.
Used By: combination.engine, conversion.convert.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

__all__ = ["round_half_up", "safe_divide", "normalize_hue"]


def round_half_up(x: float) -> int:
    """Does: Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

    Goes through the shortest decimal repr of `x`, so 0.49999999999999994
    stays below the tie.
    """
    return int(Decimal(repr(x)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def safe_divide(num: float, den: float) -> float:
    """Does: Divide, returning 0 when the denominator is 0."""
    if den == 0:
        return 0
    return num / den


def normalize_hue(degree: float) -> int:
    """Does: Round a signed degree and wrap it into [0, 360)."""
    return round_half_up(degree) % 360
