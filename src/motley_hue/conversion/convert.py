"""
convert.py
==========

Does: Convert between RGB and the other supported color models
      (HSV, HSL, CMYK, hex).
Used By: conversion.adapter (never by the combination engine).
Returns: Model value objects. Non-RGB outputs are rounded to integers with
         hues wrapped into [0, 360); RGB outputs are rounded and clamped to
         0..255 so engine values outside [0, 100] still render.
"""

from __future__ import annotations

import re

import webcolors

from motley_hue.combination.wheel import round_half_up
from motley_hue.errors import ColorConversionError
from motley_hue.models import CMYK, HSL, HSV, RGB

__all__ = [
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "is_hex_string",
]


_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


# =============================================================================
# 1) SHARED HELPERS
# =============================================================================

def _channel(unit: float) -> int:
    """Does: Map a 0..1 component to a 0..255 channel."""
    # round(…, 6) drops float noise such as 203.99999999999997 before the tie rule
    return min(255, max(0, round_half_up(round(unit * 255, 6))))


def _unit_rgb(rgb: RGB) -> tuple[float, float, float]:
    return rgb.r / 255, rgb.g / 255, rgb.b / 255


def _hue_from_unit_rgb(r: float, g: float, b: float) -> float:
    mx, mn = max(r, g, b), min(r, g, b)
    delta = mx - mn
    if delta == 0:
        return 0.0
    if mx == r:
        return 60 * (((g - b) / delta) % 6)
    if mx == g:
        return 60 * ((b - r) / delta + 2)
    return 60 * ((r - g) / delta + 4)


def _unit_rgb_from_chroma(hue: float, chroma: float, match: float) -> RGB:
    """Does: Place a chroma on the hue sextant and lift it by `match`."""
    h6 = (hue % 360) / 60
    x = chroma * (1 - abs(h6 % 2 - 1))
    sextant = int(h6) % 6
    r, g, b = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[sextant]
    return RGB(_channel(r + match), _channel(g + match), _channel(b + match))


# =============================================================================
# 2) HSV / HSL
# =============================================================================

def rgb_to_hsv(rgb: RGB) -> HSV:
    r, g, b = _unit_rgb(rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    saturation = 0.0 if mx == 0 else (mx - mn) / mx
    return HSV(
        round_half_up(_hue_from_unit_rgb(r, g, b)) % 360,
        round_half_up(saturation * 100),
        round_half_up(mx * 100),
    )


def hsv_to_rgb(hsv: HSV) -> RGB:
    value = hsv.value / 100
    chroma = value * (hsv.saturation / 100)
    return _unit_rgb_from_chroma(hsv.hue, chroma, value - chroma)


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = _unit_rgb(rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    lightness = (mx + mn) / 2
    delta = mx - mn
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))
    return HSL(
        round_half_up(_hue_from_unit_rgb(r, g, b)) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    lightness = hsl.lightness / 100
    chroma = (1 - abs(2 * lightness - 1)) * (hsl.saturation / 100)
    return _unit_rgb_from_chroma(hsl.hue, chroma, lightness - chroma / 2)


# =============================================================================
# 3) CMYK
# =============================================================================

def rgb_to_cmyk(rgb: RGB) -> CMYK:
    r, g, b = _unit_rgb(rgb)
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0, 0, 0, 100)
    c, m, y = ((1 - v - k) / (1 - k) for v in (r, g, b))
    return CMYK(*(round_half_up(v * 100) for v in (c, m, y, k)))


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    k = cmyk.k / 100
    return RGB(*(_channel((1 - v / 100) * (1 - k)) for v in (cmyk.c, cmyk.m, cmyk.y)))


# =============================================================================
# 4) HEX
# =============================================================================

def is_hex_string(value: str) -> bool:
    """Does: Tell whether `value` is 3 or 6 hex digits, optionally '#'-prefixed."""
    return bool(_HEX_RE.match(value.strip()))


def hex_to_rgb(value: str) -> RGB:
    """Does: Parse '#FF0000', 'ff0000' or '#f00' into RGB."""
    raw = value.strip()
    if not is_hex_string(raw):
        raise ColorConversionError(f"Invalid hex color: {value!r}")
    try:
        parsed = webcolors.hex_to_rgb(webcolors.normalize_hex("#" + raw.lstrip("#")))
    except ValueError as e:
        raise ColorConversionError(f"Invalid hex color: {value!r}") from e
    return RGB(parsed.red, parsed.green, parsed.blue)


def rgb_to_hex(rgb: RGB) -> str:
    """Does: Render RGB as six upper-case hex digits without '#'."""
    try:
        return webcolors.rgb_to_hex(rgb.as_tuple()).lstrip("#").upper()
    except (TypeError, ValueError) as e:
        raise ColorConversionError(f"Cannot render {rgb!r} as hex: {e}") from e
