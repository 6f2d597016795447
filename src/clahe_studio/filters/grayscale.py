"""
RGBA -> luma conversion (Rec. 601 weights).
"""
from __future__ import annotations
import numpy as np

from .buffers import as_rgba, round_half_up

__all__ = ["to_grayscale", "LUMA_WEIGHTS"]

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def to_grayscale(pixels, width: int, height: int) -> np.ndarray:
    """
    Luma of an RGBA buffer: round(0.299 R + 0.587 G + 0.114 B); alpha is dropped.

    Returns
    -------
    np.ndarray
        (H, W) uint8.

    Raises
    ------
    InvalidBufferLength
        If len(pixels) != width * height * 4.
    """
    rgba = as_rgba(pixels, width, height)
    r = rgba[..., 0].astype(np.float64)
    g = rgba[..., 1].astype(np.float64)
    b = rgba[..., 2].astype(np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    luma = round_half_up(wr * r + wg * g + wb * b)
    return np.clip(luma, 0, 255).astype(np.uint8)
