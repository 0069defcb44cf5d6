"""
api.py
======

Does: Expose the color combinations over any supported color input
      (hex strings, color names, HSV/RGB/HSL/CMYK/Hex/Keyword values).
Returns: A list in the caller's own representation whose first element is
         the input itself. Raises InvalidCountError for bad counts (checked
         before anything else) and ColorConversionError for unreadable input.
Used By: Library callers, motley_hue.cli.

Examples:
    >>> triadic("FF0000")
    ['FF0000', '00FF00', '0000FF']
    >>> complimentary("008080", "rgb")
    ['008080', 'FF7F7F']
"""

from __future__ import annotations

import logging
from typing import Any

from motley_hue.combination import engine
from motley_hue.conversion import adapter
from motley_hue.errors import InvalidCountError
from motley_hue.models import HSV, RGB, Direction, Model
from motley_hue.utils.log import debug

__all__ = [
    "analagous",
    "analogous",
    "complimentary",
    "complementary",
    "contrast",
    "even",
    "gradient",
    "monochromatic",
    "tetradic",
    "triadic",
]

logger = logging.getLogger(__name__)


def _render(color: Any, combination: list[HSV]) -> list[Any]:
    """Does: Keep `color` as the first element and render the rest like it."""
    rendered = [color] + [adapter.from_hsv(hsv, color) for hsv in combination[1:]]
    debug(f"{color!r} → {rendered}", topic="combination")
    return rendered


def _require_count(count: int, minimum: int) -> None:
    # Count errors win over conversion errors.
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < minimum:
        raise InvalidCountError(count, minimum)


# =============================================================================
# 1) HUE ROTATIONS
# =============================================================================

def analagous(color: Any, direction: Direction | str = Direction.CLOCKWISE) -> list[Any]:
    """Does: Return the color and its two analogous neighbours (30° and 60° away).

    >>> analagous("FF0000")
    ['FF0000', 'FF8000', 'FFFF00']
    >>> analagous("FF0000", "counter_clockwise")
    ['FF0000', 'FF0080', 'FF00FF']
    """
    direction = Direction(direction)
    return _render(color, engine.analagous(adapter.to_hsv(color), direction))


def complimentary(color: Any, model: Model | str = Model.HSV) -> list[Any]:
    """Does: Return the color and its complement.

    With `model="hsv"` the complement is the hue 180° away. With
    `model="rgb"` it is the color that adds up to white, (255 - r, 255 - g,
    255 - b).

    >>> complimentary("008080", "hsv")
    ['008080', '800000']
    """
    model = Model(model)
    if model is Model.HSV:
        return even(color, 2)

    rgb = adapter.to_rgb(color)
    compliment = RGB(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)
    logger.debug("complimentary (rgb): %s → %s", rgb, compliment)
    return [color, adapter.from_rgb(compliment, color)]


def even(color: Any, count: int) -> list[Any]:
    """Does: Return `count` colors evenly spaced round the wheel, starting at `color`.

    >>> even("FF0000", 5)
    ['FF0000', 'CCFF00', '00FF66', '0066FF', 'CC00FF']
    """
    _require_count(count, 2)
    return _render(color, engine.even(adapter.to_hsv(color), count))


def contrast(color: Any, count: int) -> list[Any]:
    """Does: Return `count` colors where each is easy to tell from the previous one.

    Suited to categorical data. Up to six colors this is `even`.

    >>> contrast("FF0000", 7)
    ['FF0000', 'FFFF00', '00FF00', '00FFFF', '0000FF', 'FF00FF', 'FF8000']
    """
    _require_count(count, 2)
    return _render(color, engine.contrast(adapter.to_hsv(color), count))


def triadic(color: Any) -> list[Any]:
    """Does: Return the color and the two hues 120° and 240° away.

    >>> triadic("FF0000")
    ['FF0000', '00FF00', '0000FF']
    """
    return even(color, 3)


def tetradic(color: Any) -> list[Any]:
    """Does: Return the color and the three hues 90°, 180° and 270° away.

    >>> tetradic("FF0000")
    ['FF0000', '80FF00', '00FFFF', '8000FF']
    """
    return even(color, 4)


# =============================================================================
# 2) INTERPOLATIONS
# =============================================================================

def gradient(color1: Any, color2: Any, count: int) -> list[Any]:
    """Does: Return `count` colors going from `color1` to `color2`.

    Output uses `color1`'s representation; `color2` closes the list,
    converted when its representation differs.

    >>> gradient("FF0000", "008080", 5)
    ['FF0000', 'DF00A7', '6000BF', '00289F', '008080']
    """
    _require_count(count, 3)
    base1 = adapter.to_hsv(color1)
    base2 = adapter.to_hsv(color2)
    combination = engine.gradient(base1, base2, count)
    return _render(color1, combination[:-1]) + [adapter.coerce(color2, color1)]


def monochromatic(color: Any, count: int = 3) -> list[Any]:
    """Does: Return the color and `count - 1` evenly stepped shades towards black.

    >>> monochromatic("FF0000")
    ['FF0000', 'AB0000', '570000']
    >>> monochromatic("FF0000", 5)
    ['FF0000', 'CC0000', '990000', '660000', '330000']
    """
    _require_count(count, 2)
    return _render(color, engine.monochromatic(adapter.to_hsv(color), count))


# ── Conventional spellings ───────────────────────────────────────────────────
analogous = analagous
complementary = complimentary
