# --- file: clahe_studio/errors.py ---
"""
Error taxonomy for the CLAHE core.

All errors derive from ``ValueError`` so callers that already guard numeric
input with ``except ValueError`` keep working.
"""
from __future__ import annotations

__all__ = [
    "ClaheError",
    "InvalidBufferLength",
    "InvalidParameter",
    "DegenerateTileWarning",
]


class ClaheError(ValueError):
    """Base class for every error raised by the core."""


class InvalidBufferLength(ClaheError):
    """Pixel/luma buffer length does not match the declared dimensions."""

    def __init__(self, actual: int, width: int, height: int, channels: int):
        self.actual = int(actual)
        self.width = int(width)
        self.height = int(height)
        self.channels = int(channels)
        expected = self.width * self.height * self.channels
        super().__init__(
            f"Buffer has {self.actual} samples, expected {expected} "
            f"({self.width}x{self.height}x{self.channels})."
        )


class InvalidParameter(ClaheError):
    """Parameter outside its domain (tile grid, clip limit, colormap)."""


class DegenerateTileWarning(RuntimeWarning):
    """A tile holds no pixels; its LUT falls back to identity."""
