# motley_hue/models.py
"""
models.

Does: Define the immutable color value types shared by the engine and the
      adapter layer, plus the direction/model enums.
Returns: Frozen dataclasses compared by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["HSV", "RGB", "HSL", "CMYK", "Hex", "Keyword", "Direction", "Model"]


@dataclass(frozen=True)
class HSV:
    """Hue in degrees [0, 360), saturation and value in percent."""

    hue: float
    saturation: float
    value: float


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSL:
    hue: float
    saturation: float
    lightness: float


@dataclass(frozen=True)
class CMYK:
    c: float
    m: float
    y: float
    k: float


@dataclass(frozen=True)
class Hex:
    """Six hex digits, upper case, without the leading '#'."""

    hex: str


@dataclass(frozen=True)
class Keyword:
    """A named color such as 'red' or 'acid green'."""

    keyword: str


class Direction(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class Model(str, Enum):
    HSV = "hsv"
    RGB = "rgb"
