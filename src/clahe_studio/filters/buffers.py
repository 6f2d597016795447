# -*- coding: utf-8 -*-
"""
buffers.py — shared helpers for pixel buffers: length checks and reshaping.
No image processing here — only utilities used by every filter stage.
"""
from __future__ import annotations
import numpy as np

from ..errors import InvalidBufferLength

__all__ = ["_as_plane", "as_rgba", "as_luma", "round_half_up"]


def _as_plane(buf, width: int, height: int, channels: int) -> np.ndarray:
    """
    View `buf` as a (H, W[, C]) uint8 array after checking its length.

    Accepts flat buffers (row-major, interleaved) as well as already shaped
    arrays; anything whose total size disagrees with width*height*channels
    raises InvalidBufferLength.
    """
    a = np.asarray(buf)
    width, height = int(width), int(height)
    if width <= 0 or height <= 0 or a.size != width * height * channels:
        raise InvalidBufferLength(a.size, width, height, channels)
    if a.dtype != np.uint8:
        a = np.clip(a, 0, 255).astype(np.uint8)
    shape = (height, width) if channels == 1 else (height, width, channels)
    return a.reshape(shape)


def as_rgba(pixels, width: int, height: int) -> np.ndarray:
    """RGBA buffer -> (H, W, 4) uint8."""
    return _as_plane(pixels, width, height, 4)


def as_luma(luma, width: int, height: int) -> np.ndarray:
    """Single-channel buffer -> (H, W) uint8."""
    return _as_plane(luma, width, height, 1)


def round_half_up(x: np.ndarray) -> np.ndarray:
    """Round to nearest, ties toward +inf (not numpy's banker's rounding)."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)
