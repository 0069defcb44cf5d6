"""
named.py
========

Does: Resolve named colors (CSS4 + XKCD) to RGB and pick the nearest name
      for an arbitrary RGB, by Lab (ΔE76) or sRGB distance.
Used By: conversion.adapter for `Keyword` values and plain color-name strings.
Returns: RGB values, names (str), distances (float).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from motley_hue.models import RGB
from motley_hue.utils.load_config import ConfigFileNotFound, load_config

__all__ = [
    "PALETTES",
    "METRICS",
    "normalize_color_name",
    "rgb_distance",
    "lab_distance",
    "named_color_map",
    "lookup_named_color",
    "nearest_color_name",
    "get_named_settings",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

PALETTES = ("css4", "xkcd")

CONFIG_FILE = "motley_hue"
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


# =============================================================================
# 1) NAME NORMALIZATION
# =============================================================================

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_color_name(name: str) -> str:
    """Does: Lower-case and collapse '-', '_' and runs of spaces into one space."""
    return _SEPARATORS.sub(" ", name.strip().lower()).strip()


# =============================================================================
# 2) DISTANCES
# =============================================================================

def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space."""
    return sum((a - b) ** 2 for a, b in zip(rgb1.as_tuple(), rgb2.as_tuple())) ** 0.5


def _srgb_to_linear(v: float) -> float:
    v = v / 255.0
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


@lru_cache(maxsize=4096)
def _rgb_to_lab(rgb: RGB) -> tuple[float, float, float]:
    r, g, b = (_srgb_to_linear(float(c)) for c in rgb.as_tuple())
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883  # D65 white
    fx, fy, fz = _f_lab(x / Xn), _f_lab(y / Yn), _f_lab(z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute ΔE76 (Lab distance) between two RGB colors."""
    L1, a1, b1 = _rgb_to_lab(rgb1)
    L2, a2, b2 = _rgb_to_lab(rgb2)
    return ((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5


METRICS: dict[str, Callable[[RGB, RGB], float]] = {
    "lab": lab_distance,
    "rgb": rgb_distance,
}


# =============================================================================
# 3) SETTINGS
# =============================================================================

def _validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    palettes = data.get("named_palettes", list(PALETTES))
    if not isinstance(palettes, list) or not palettes:
        raise ValueError("named_palettes must be a non-empty list")
    unknown = [p for p in palettes if p not in PALETTES]
    if unknown:
        raise ValueError(f"unknown palettes: {unknown}")
    metric = data.get("keyword_metric", "lab")
    if metric not in METRICS:
        raise ValueError(f"unknown keyword_metric: {metric!r}")
    return {"named_palettes": tuple(palettes), "keyword_metric": metric}


def get_named_settings() -> dict[str, Any]:
    """Does: Load the palette/metric settings, preferring an override data dir.

    An override directory without motley_hue.json falls back to the file
    shipped in the package.
    """
    try:
        return load_config(CONFIG_FILE, validator=_validate_settings)
    except ConfigFileNotFound:
        logger.debug("No %s.json in override data dir; using package defaults", CONFIG_FILE)
        return load_config(
            CONFIG_FILE, base_dir=PACKAGE_DATA_DIR, validator=_validate_settings
        )


# =============================================================================
# 4) NAMED COLOR MAP (lazy import)
# =============================================================================

@lru_cache(maxsize=8)
def named_color_map(palettes: tuple[str, ...] = PALETTES) -> dict[str, RGB]:
    """Does: Merge the requested matplotlib palettes into {name: RGB}, earlier palettes win."""
    from matplotlib.colors import CSS4_COLORS, XKCD_COLORS
    from webcolors import hex_to_rgb

    sources = {
        "css4": ((name, hx) for name, hx in CSS4_COLORS.items()),
        "xkcd": ((name.replace("xkcd:", ""), hx) for name, hx in XKCD_COLORS.items()),
    }
    named: dict[str, RGB] = {}
    for palette in palettes:
        for name, hx in sources[palette]:
            named.setdefault(normalize_color_name(name), RGB(*hex_to_rgb(hx)))
    logger.debug("Named color map built: %d names from %s", len(named), palettes)
    return named


def lookup_named_color(name: str, palettes: tuple[str, ...] | None = None) -> RGB | None:
    """Does: Return the RGB of a named color, or None when unknown.

    'Dark-Slate Gray' and 'darkslategray' both resolve: CSS4 names carry no
    spaces, so the spaceless form is tried after the spaced one.
    """
    if palettes is None:
        palettes = get_named_settings()["named_palettes"]
    named = named_color_map(palettes)
    key = normalize_color_name(name)
    if not key:
        return None
    return named.get(key) or named.get(key.replace(" ", ""))


def nearest_color_name(
    rgb: RGB,
    palettes: tuple[str, ...] | None = None,
    metric: Callable[[RGB, RGB], float] | None = None,
) -> str:
    """Does: Find the name whose color is closest to `rgb` (first wins on ties)."""
    if palettes is None or metric is None:
        settings = get_named_settings()
        palettes = palettes or settings["named_palettes"]
        metric = metric or METRICS[settings["keyword_metric"]]
    best_name, best_d = "", float("inf")
    for name, ref in named_color_map(palettes).items():
        d = metric(rgb, ref)
        if d < best_d:
            best_name, best_d = name, d
            if d == 0:
                break
    return best_name
