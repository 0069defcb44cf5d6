"""
engine.py
=========

Does: Compute color-wheel combinations from an HSV base.
Returns: list[HSV] whose first element is the base object itself; the rest
         are new values in an order fixed by the operation.
Used By: motley_hue.api (after the adapter has produced an HSV).

All offsets go through `normalize_hue`, so every generated hue is an int in
[0, 360). Saturation and value are copied unchanged except in `gradient`
and `monochromatic`, which never clamp.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from motley_hue.combination.wheel import normalize_hue, round_half_up, safe_divide
from motley_hue.errors import InvalidCountError
from motley_hue.models import HSV, Direction

__all__ = [
    "analagous",
    "complimentary",
    "contrast",
    "even",
    "gradient",
    "monochromatic",
    "tetradic",
    "triadic",
    "ANALOGOUS_STEP",
    "CONTRAST_SECTORS",
    "MONOCHROMATIC_MAX_COUNT",
]

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────
ANALOGOUS_STEP = 30
CONTRAST_SECTORS = 6
# monochromatic steps by 100 // count, which is 0 past this point
MONOCHROMATIC_MAX_COUNT = 100


# =============================================================================
# 1) GUARDS
# =============================================================================

def _check_count(count: int, minimum: int, maximum: int | None = None) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < minimum or (maximum is not None and count > maximum):
        raise InvalidCountError(count, minimum, maximum)


def _rotate(base: HSV, hue_offsets: Iterable[float]) -> list[HSV]:
    """Does: Return [base] + one HSV per offset with only the hue moved."""
    return [base] + [
        HSV(normalize_hue(base.hue + offset), base.saturation, base.value)
        for offset in hue_offsets
    ]


# =============================================================================
# 2) HUE ROTATIONS
# =============================================================================

def analagous(base: HSV, direction: Direction | str = Direction.CLOCKWISE) -> list[HSV]:
    """Does: Return the base and its two neighbours 30° and 60° away.

    Clockwise adds to the hue, counter-clockwise subtracts. The three colors
    always sit within a 90° slice of the wheel.
    """
    direction = Direction(direction)
    sign = 1 if direction is Direction.CLOCKWISE else -1
    return _rotate(base, (sign * i * ANALOGOUS_STEP for i in (1, 2)))


def even(base: HSV, count: int) -> list[HSV]:
    """Does: Return `count` colors spaced round(360 / count)° apart, base first.

    The step is rounded once, so counts that do not divide 360 are only
    approximately even (count=7 steps by 51°).
    """
    _check_count(count, 2)
    degree_offset = round_half_up(360 / count)
    logger.debug("even: count=%d step=%d", count, degree_offset)
    return _rotate(base, (i * degree_offset for i in range(1, count)))


def complimentary(base: HSV) -> list[HSV]:
    """Does: Return the base and the hue 180° opposite."""
    return even(base, 2)


def triadic(base: HSV) -> list[HSV]:
    return even(base, 3)


def tetradic(base: HSV) -> list[HSV]:
    return even(base, 4)


def contrast(base: HSV, count: int) -> list[HSV]:
    """Does: Return `count` hues ordered so neighbours in the list differ strongly.

    The first six are 60° apart. Each later lap of six is shifted by half of
    the previous shift (30°, then 15°, ...), filling the gaps between hues
    already used.
    """
    _check_count(count, 2)
    if count <= CONTRAST_SECTORS:
        return even(base, count)

    degree_offset = round_half_up(360 / CONTRAST_SECTORS)
    offsets = []
    for i in range(1, count):
        lap = i // CONTRAST_SECTORS
        base_offset = i * degree_offset
        rotation_offset = -360 * lap + safe_divide(degree_offset, 2 * lap)
        offsets.append(round_half_up(base_offset + rotation_offset))
    logger.debug("contrast: count=%d offsets=%s", count, offsets)
    return _rotate(base, offsets)


# =============================================================================
# 3) INTERPOLATIONS
# =============================================================================

def gradient(base1: HSV, base2: HSV, count: int) -> list[HSV]:
    """Does: Interpolate `count` colors from base1 to base2, both included.

    Hue moves by the raw difference base1.hue - base2.hue split into
    count - 1 steps and *added* to base1.hue, so the walk does not take the
    shortest way round the wheel (0 -> 180 passes through 315, 270, 225).
    Saturation and value are linear and unclamped.
    """
    _check_count(count, 3)
    steps = count - 1
    hue_step = safe_divide(base1.hue - base2.hue, steps)
    saturation_step = safe_divide(base1.saturation - base2.saturation, steps)
    value_step = safe_divide(base1.value - base2.value, steps)

    inner = [
        HSV(
            normalize_hue(base1.hue + i * hue_step),
            base1.saturation - i * saturation_step,
            base1.value - i * value_step,
        )
        for i in range(1, count - 1)
    ]
    return [base1, *inner, base2]


def monochromatic(base: HSV, count: int = 3) -> list[HSV]:
    """Does: Return the base and `count - 1` darker shades towards black.

    Value offsets are 0, s, 2s, ... up to 100 with s = 100 // count; the
    first `count - 1` non-zero offsets are used. Results are rounded and
    may go below 0 when the base is already dark.
    """
    _check_count(count, 2, MONOCHROMATIC_MAX_COUNT)
    step = 100 // count
    value_offsets = list(range(0, 101, step))[1:count]
    return [base] + [
        HSV(base.hue, base.saturation, round_half_up(base.value - offset))
        for offset in value_offsets
    ]
