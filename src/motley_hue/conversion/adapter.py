"""
adapter.py
==========

Does: Turn any supported color input into HSV/RGB for the engine, and render
      engine output back in the caller's original representation.
Used By: motley_hue.api.

Supported inputs:
- hex strings, with or without '#', 3 or 6 digits ("FF0000", "#f00")
- color-name strings ("red", "dark slate gray", "acid green")
- model values: HSV, RGB, HSL, CMYK, Hex, Keyword

Strings are tried as hex first, so "bad" or "fed" read as hex colors.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from motley_hue.conversion import convert
from motley_hue.conversion.named import lookup_named_color, nearest_color_name
from motley_hue.errors import ColorConversionError
from motley_hue.models import CMYK, HSL, HSV, RGB, Hex, Keyword
from motley_hue.utils.log import debug

__all__ = [
    "ColorAdapter",
    "HexStringAdapter",
    "KeywordStringAdapter",
    "StructAdapter",
    "ADAPTERS",
    "adapter_for",
    "to_hsv",
    "to_rgb",
    "from_hsv",
    "from_rgb",
    "coerce",
]


@runtime_checkable
class ColorAdapter(Protocol):
    """
    Structural contract for one family of color representations.

    - accepts(color): True when this adapter handles `color`.
    - to_rgb / to_hsv: Interpret `color`; raise ColorConversionError if it
      cannot be read.
    - from_rgb / from_hsv: Render a value in the representation of `like`
      (the caller's original input).
    """

    def accepts(self, color: Any) -> bool: ...
    def to_rgb(self, color: Any) -> RGB: ...
    def to_hsv(self, color: Any) -> HSV: ...
    def from_rgb(self, rgb: RGB, like: Any) -> Any: ...
    def from_hsv(self, hsv: HSV, like: Any) -> Any: ...


def _keyword_to_rgb(name: str) -> RGB:
    rgb = lookup_named_color(name)
    if rgb is None:
        raise ColorConversionError(f"Unknown color name: {name!r}")
    return rgb


# =============================================================================
# 1) STRING ADAPTERS
# =============================================================================

class HexStringAdapter:
    """Hex strings. Output keeps the caller's '#' prefix and letter case."""

    def accepts(self, color: Any) -> bool:
        return isinstance(color, str) and convert.is_hex_string(color)

    def to_rgb(self, color: str) -> RGB:
        return convert.hex_to_rgb(color)

    def to_hsv(self, color: str) -> HSV:
        return convert.rgb_to_hsv(self.to_rgb(color))

    def from_rgb(self, rgb: RGB, like: str) -> str:
        digits = convert.rgb_to_hex(rgb)
        like = like.strip()
        if any(ch in "abcdef" for ch in like):
            digits = digits.lower()
        return "#" + digits if like.startswith("#") else digits

    def from_hsv(self, hsv: HSV, like: str) -> str:
        return self.from_rgb(convert.hsv_to_rgb(hsv), like)


class KeywordStringAdapter:
    """Color-name strings. Output is the nearest known name."""

    def accepts(self, color: Any) -> bool:
        return isinstance(color, str)

    def to_rgb(self, color: str) -> RGB:
        return _keyword_to_rgb(color)

    def to_hsv(self, color: str) -> HSV:
        return convert.rgb_to_hsv(self.to_rgb(color))

    def from_rgb(self, rgb: RGB, like: str) -> str:
        return nearest_color_name(rgb)

    def from_hsv(self, hsv: HSV, like: str) -> str:
        return self.from_rgb(convert.hsv_to_rgb(hsv), like)


# =============================================================================
# 2) MODEL VALUE ADAPTER
# =============================================================================

def _validated_rgb(rgb: RGB) -> RGB:
    channels = rgb.as_tuple()
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in channels):
        raise ColorConversionError(f"RGB out of bounds: {channels}")
    return rgb


_TO_RGB: dict[type, Callable[[Any], RGB]] = {
    RGB: _validated_rgb,
    HSV: convert.hsv_to_rgb,
    HSL: convert.hsl_to_rgb,
    CMYK: convert.cmyk_to_rgb,
    Hex: lambda c: convert.hex_to_rgb(c.hex),
    Keyword: lambda c: _keyword_to_rgb(c.keyword),
}

_FROM_RGB: dict[type, Callable[[RGB], Any]] = {
    RGB: lambda rgb: rgb,
    HSV: convert.rgb_to_hsv,
    HSL: convert.rgb_to_hsl,
    CMYK: convert.rgb_to_cmyk,
    Hex: lambda rgb: Hex(convert.rgb_to_hex(rgb)),
    Keyword: lambda rgb: Keyword(nearest_color_name(rgb)),
}


class StructAdapter:
    """HSV, RGB, HSL, CMYK, Hex and Keyword values. Output has the type of `like`."""

    def accepts(self, color: Any) -> bool:
        return type(color) in _TO_RGB

    def to_rgb(self, color: Any) -> RGB:
        return _TO_RGB[type(color)](color)

    def to_hsv(self, color: Any) -> HSV:
        if isinstance(color, HSV):
            return color
        return convert.rgb_to_hsv(self.to_rgb(color))

    def from_rgb(self, rgb: RGB, like: Any) -> Any:
        return _FROM_RGB[type(like)](rgb)

    def from_hsv(self, hsv: HSV, like: Any) -> Any:
        if isinstance(like, HSV):
            return hsv
        return self.from_rgb(convert.hsv_to_rgb(hsv), like)


# =============================================================================
# 3) DISPATCH
# =============================================================================

ADAPTERS: tuple[ColorAdapter, ...] = (
    StructAdapter(),
    HexStringAdapter(),
    KeywordStringAdapter(),
)


def adapter_for(color: Any) -> ColorAdapter:
    """Does: Return the first adapter accepting `color` or raise ColorConversionError."""
    for adapter in ADAPTERS:
        if adapter.accepts(color):
            return adapter
    raise ColorConversionError(f"Unsupported color input: {color!r}")


def to_hsv(color: Any) -> HSV:
    adapter = adapter_for(color)
    hsv = adapter.to_hsv(color)
    debug(f"{type(adapter).__name__}: {color!r} → {hsv}", topic="conversion")
    return hsv


def to_rgb(color: Any) -> RGB:
    adapter = adapter_for(color)
    rgb = adapter.to_rgb(color)
    debug(f"{type(adapter).__name__}: {color!r} → {rgb}", topic="conversion")
    return rgb


def from_hsv(hsv: HSV, like: Any) -> Any:
    return adapter_for(like).from_hsv(hsv, like)


def from_rgb(rgb: RGB, like: Any) -> Any:
    return adapter_for(like).from_rgb(rgb, like)


def coerce(color: Any, like: Any) -> Any:
    """Does: Express `color` in the representation of `like`.

    Model values of the same type come back untouched; anything else goes
    through RGB.
    """
    if not isinstance(like, str) and type(color) is type(like):
        return color
    return from_rgb(to_rgb(color), like)
