"""
CDF -> lookup table for one tile.
"""
from __future__ import annotations
import numpy as np

from .buffers import round_half_up
from .tiles import NUM_BINS

__all__ = ["identity_lut", "cdf_min", "build_lut"]


def identity_lut() -> np.ndarray:
    return np.arange(NUM_BINS, dtype=np.uint8)


def cdf_min(cdf: np.ndarray) -> int:
    """First nonzero CDF value (0 when the histogram is empty)."""
    nz = np.flatnonzero(cdf)
    return int(cdf[nz[0]]) if nz.size else 0


def build_lut(hist: np.ndarray, num_pixels: int) -> np.ndarray:
    """
    Equalization LUT from a (clipped) histogram.

    LUT[i] = round((CDF[i] - cdf_min) / (N - cdf_min) * 255), clamped to
    [0, 255]. Tiles with N <= 1, or whose pixels all share one bin so that
    N == cdf_min, map through the identity.

    Returns
    -------
    np.ndarray
        256 uint8 entries, non-decreasing.
    """
    n = int(num_pixels)
    cdf = np.cumsum(np.asarray(hist, dtype=np.int64))
    lo = cdf_min(cdf)
    if n <= 1 or n == lo:
        return identity_lut()
    scaled = ((cdf - lo).astype(np.float64) / float(n - lo)) * 255.0
    return np.clip(round_half_up(scaled), 0, 255).astype(np.uint8)
