"""
combination package.
====================

Does: Pure hue/saturation/value arithmetic over HSV values. Nothing here
      knows about hex strings or other representations.
"""

from .engine import (
    analagous,
    complimentary,
    contrast,
    even,
    gradient,
    monochromatic,
    tetradic,
    triadic,
)
from .wheel import normalize_hue, round_half_up, safe_divide

__all__ = [
    "analagous",
    "complimentary",
    "contrast",
    "even",
    "gradient",
    "monochromatic",
    "tetradic",
    "triadic",
    "normalize_hue",
    "round_half_up",
    "safe_divide",
]

__docformat__ = "google"
