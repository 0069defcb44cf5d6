"""
errors.py.

Does: Define the typed failures raised by the combination engine and the
      color adapter layer.
"""

from __future__ import annotations

__all__ = ["MotleyHueError", "InvalidCountError", "ColorConversionError"]


class MotleyHueError(Exception):
    """Base class for every error raised by motley_hue."""


class InvalidCountError(MotleyHueError, ValueError):
    """Raise when a count parameter is outside the operation's accepted range."""

    def __init__(self, count: int, minimum: int, maximum: int | None = None):
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        if maximum is not None and count > maximum:
            msg = f"Count must be a positive integer less than or equal to {maximum}"
        else:
            msg = f"Count must be a positive integer greater than or equal to {minimum}"
        super().__init__(msg)


class ColorConversionError(MotleyHueError, ValueError):
    """Raise when an input cannot be interpreted as (or rendered to) a color."""
