"""
conversion package.
==================

Does: Bridge between caller color representations and the HSV values the
      combination engine works on.
Used By: motley_hue.api.
"""

from .adapter import (
    ADAPTERS,
    ColorAdapter,
    HexStringAdapter,
    KeywordStringAdapter,
    StructAdapter,
    adapter_for,
    coerce,
    from_hsv,
    from_rgb,
    to_hsv,
    to_rgb,
)
from .named import lookup_named_color, nearest_color_name

__all__ = [
    "ADAPTERS",
    "ColorAdapter",
    "HexStringAdapter",
    "KeywordStringAdapter",
    "StructAdapter",
    "adapter_for",
    "coerce",
    "from_hsv",
    "from_rgb",
    "to_hsv",
    "to_rgb",
    "lookup_named_color",
    "nearest_color_name",
]

__docformat__ = "google"
