"""
Contrast limiting: clip a tile histogram and redistribute the excess.
"""
from __future__ import annotations
import math

import numpy as np

from .tiles import NUM_BINS

__all__ = ["clip_threshold", "clip_histogram"]


def clip_threshold(clip_limit: float, num_pixels: int) -> int:
    """floor(clip_limit * N / 256), never below zero."""
    return max(0, math.floor((float(clip_limit) * int(num_pixels)) / NUM_BINS))


def clip_histogram(hist: np.ndarray, clip_limit: float, num_pixels: int) -> np.ndarray:
    """
    Cap every bin at the clip threshold and hand the excess back.

    The excess is first spread evenly (floor(excess / 256) per bin); the
    remainder then goes one unit at a time to bins (k * step) % 256,
    step = max(1, 256 // (remainder + 1)). The total count is preserved.

    Parameters
    ----------
    hist : np.ndarray
        256 non-negative counts. Not modified.
    clip_limit : float
        Relative clip limit; <= 0 clips everything to zero before redistribution.
    num_pixels : int
        Tile pixel count N used for the threshold.

    Returns
    -------
    np.ndarray
        Clipped histogram, int64, same total as `hist`.
    """
    h = np.array(hist, dtype=np.int64, copy=True)
    thr = clip_threshold(clip_limit, num_pixels)

    over = h > thr
    total_excess = int((h[over] - thr).sum())
    h[over] = thr

    avg_increase = total_excess // NUM_BINS
    remainder = total_excess - avg_increase * NUM_BINS
    h += avg_increase

    if remainder:
        step = max(1, NUM_BINS // (remainder + 1))
        idx = (np.arange(remainder, dtype=np.int64) * step) % NUM_BINS
        np.add.at(h, idx, 1)
    return h
