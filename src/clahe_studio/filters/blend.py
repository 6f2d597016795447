# --- file: clahe_studio/filters/blend.py ---
"""
Bilinear blending of per-tile LUTs.

Each tile's LUT is anchored at the tile center. A pixel at (x, y) sits at the
continuous tile coordinate (x / tile_width, y / tile_height); the four tiles
whose centers surround it are

    tx1 = clamp(floor(tileX - 0.5), 0, n - 1),   tx2 = min(tx1 + 1, n - 1)
    ty1 = clamp(floor(tileY - 0.5), 0, n - 1),   ty2 = min(ty1 + 1, n - 1)

with weights fx = clamp(tileX - tx1 - 0.5, 0, 1) (fy likewise). Pixels in the
outer half of an edge tile therefore blend with that tile only; there is no
wraparound or mirroring.

Typical usage
-------------
>>> out = blend_tiles(luma, luts, tile_width=64, tile_height=48)
"""

from __future__ import annotations
from typing import Tuple

import numpy as np

from .buffers import round_half_up

__all__ = ["neighbor_tiles", "blend_tiles"]


def neighbor_tiles(size: int, tile_size: int, grid: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Lower/upper neighbor tile indices and blend weight along one axis.

    Parameters
    ----------
    size : int
        Number of pixels along the axis (W or H).
    tile_size : int
        Nominal tile extent along the axis.
    grid : int
        Tiles along the axis.

    Returns
    -------
    t1, t2 : np.ndarray
        int64 tile indices, length `size`.
    f : np.ndarray
        float64 weight of `t2`, in [0, 1].
    """
    pos = np.arange(size, dtype=np.float64) / float(tile_size)
    t1 = np.clip(np.floor(pos - 0.5), 0, grid - 1).astype(np.int64)
    t2 = np.minimum(t1 + 1, grid - 1)
    f = np.clip(pos - t1 - 0.5, 0.0, 1.0)
    return t1, t2, f


def blend_tiles(luma: np.ndarray, luts: np.ndarray, tile_width: int, tile_height: int) -> np.ndarray:
    """
    Map every pixel through the four surrounding tile LUTs and blend.

    Parameters
    ----------
    luma : np.ndarray
        (H, W) uint8 source intensities.
    luts : np.ndarray
        (grid, grid, 256) tile LUTs indexed [row, col, value].
    tile_width, tile_height : int
        Nominal tile size used to lay out the grid.

    Returns
    -------
    np.ndarray
        (H, W) uint8.
    """
    H, W = luma.shape
    grid = luts.shape[0]
    if luts.shape != (grid, grid, 256):
        raise ValueError(f"Expected LUT grid of shape (n, n, 256), got {luts.shape}.")

    tx1, tx2, fx = neighbor_tiles(W, tile_width, grid)
    ty1, ty2, fy = neighbor_tiles(H, tile_height, grid)

    # broadcast to (H, W): rows index y, columns index x
    r1, r2 = ty1[:, None], ty2[:, None]
    c1, c2 = tx1[None, :], tx2[None, :]
    fx = fx[None, :]
    fy = fy[:, None]

    lut = luts.astype(np.float64, copy=False)
    v = luma.astype(np.intp, copy=False)
    tl = lut[r1, c1, v]
    tr = lut[r1, c2, v]
    bl = lut[r2, c1, v]
    br = lut[r2, c2, v]

    top = tl + fx * (tr - tl)
    bottom = bl + fx * (br - bl)
    out = round_half_up(top + fy * (bottom - top))
    return np.clip(out, 0, 255).astype(np.uint8)
