"""
motley_hue
==========

Does: Root package for color-wheel combinations (complementary, analogous,
      triadic, tetradic, even, contrast, gradient, monochromatic).
Returns: The public operations over any supported color representation, plus
         the value types and errors they use.
Used by: Library callers and the `motley-hue` CLI.
"""

from .api import (
    analagous,
    analogous,
    complementary,
    complimentary,
    contrast,
    even,
    gradient,
    monochromatic,
    tetradic,
    triadic,
)
from .errors import ColorConversionError, InvalidCountError, MotleyHueError
from .models import CMYK, HSL, HSV, RGB, Direction, Hex, Keyword, Model

__all__ = [
    # operations
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
    # types
    "HSV",
    "RGB",
    "HSL",
    "CMYK",
    "Hex",
    "Keyword",
    "Direction",
    "Model",
    # errors
    "MotleyHueError",
    "InvalidCountError",
    "ColorConversionError",
]
__docformat__ = "google"
