# --- file: clahe_studio/filters/tiles.py ---
"""
Tile grid geometry and per-tile 256-bin histograms.

The grid always has `tile_grid_size` x `tile_grid_size` cells of nominal size
ceil(W / n) x ceil(H / n). Cells on the right/bottom edge are cropped to the
image; when n does not divide the image they may shrink to zero pixels.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from ..errors import InvalidParameter

__all__ = [
    "NUM_BINS",
    "check_tile_grid_size",
    "TileGeometry",
    "tile_geometry",
    "tile_histogram",
    "tile_histograms",
]

NUM_BINS = 256


@dataclass(frozen=True)
class TileGeometry:
    """Tile layout of one image.

    Attributes
    ----------
    width, height : int
        Image size in pixels.
    grid : int
        Tiles per side.
    tile_width, tile_height : int
        Nominal tile size, ceil(width / grid) and ceil(height / grid).
    boxes : tuple[tuple[int,int,int,int], ...]
        (y0, y1, x0, x1) inclusive-exclusive windows, row-major over (row, col).
        Windows past the image edge are empty (y0 == y1 or x0 == x1).
    """
    width: int
    height: int
    grid: int
    tile_width: int
    tile_height: int
    boxes: Tuple[Tuple[int, int, int, int], ...]

    def box(self, row: int, col: int) -> Tuple[int, int, int, int]:
        return self.boxes[row * self.grid + col]

    def pixel_count(self, row: int, col: int) -> int:
        y0, y1, x0, x1 = self.box(row, col)
        return (y1 - y0) * (x1 - x0)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """(row, col) pairs in row-major order."""
        for row in range(self.grid):
            for col in range(self.grid):
                yield row, col


def check_tile_grid_size(tile_grid_size) -> int:
    if isinstance(tile_grid_size, bool) or not isinstance(tile_grid_size, (int, np.integer)):
        if isinstance(tile_grid_size, (float, np.floating)) and float(tile_grid_size).is_integer():
            tile_grid_size = int(tile_grid_size)
        else:
            raise InvalidParameter(f"tile_grid_size must be an integer, got {tile_grid_size!r}")
    n = int(tile_grid_size)
    if n < 1:
        raise InvalidParameter(f"tile_grid_size must be >= 1, got {n}")
    return n


def tile_geometry(width: int, height: int, tile_grid_size: int) -> TileGeometry:
    """
    Lay out an n x n tile grid over a (height, width) image.

    Raises
    ------
    InvalidParameter
        If tile_grid_size is not an integer >= 1.
    """
    n = check_tile_grid_size(tile_grid_size)
    W, H = int(width), int(height)
    tw = math.ceil(W / n)
    th = math.ceil(H / n)

    boxes: List[Tuple[int, int, int, int]] = []
    for row in range(n):
        y0 = min(row * th, H)
        y1 = min(y0 + th, H)
        for col in range(n):
            x0 = min(col * tw, W)
            x1 = min(x0 + tw, W)
            boxes.append((y0, y1, x0, x1))

    return TileGeometry(width=W, height=H, grid=n, tile_width=tw, tile_height=th, boxes=tuple(boxes))


def tile_histogram(luma: np.ndarray, box: Tuple[int, int, int, int]) -> np.ndarray:
    """256-bin count of the pixels inside one (y0, y1, x0, x1) window (int64)."""
    y0, y1, x0, x1 = box
    values = luma[y0:y1, x0:x1].ravel()
    return np.bincount(values, minlength=NUM_BINS).astype(np.int64, copy=False)


def tile_histograms(luma: np.ndarray, geometry: TileGeometry) -> Tuple[np.ndarray, np.ndarray]:
    """
    Histograms for every tile.

    Returns
    -------
    hists : np.ndarray
        (grid, grid, 256) int64.
    counts : np.ndarray
        (grid, grid) int64 pixel count per tile; equals hists.sum(-1).
    """
    n = geometry.grid
    hists = np.zeros((n, n, NUM_BINS), dtype=np.int64)
    counts = np.zeros((n, n), dtype=np.int64)
    for row, col in geometry.cells():
        hists[row, col] = tile_histogram(luma, geometry.box(row, col))
        counts[row, col] = geometry.pixel_count(row, col)
    return hists, counts
