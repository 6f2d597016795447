# --- file: clahe_studio/filters/contrast.py ---
"""
Contrast Limited Adaptive Histogram Equalization (CLAHE) on 8-bit luma.

Per tile: histogram -> clip & redistribute -> CDF LUT. The tile LUTs are then
blended bilinearly between tile centers (see blend.py).

Typical usage
-------------
>>> from clahe_studio.filters import to_grayscale, compute_clahe
>>> gray = to_grayscale(rgba, w, h)
>>> out = compute_clahe(gray, w, h, clip_limit=2.0, tile_grid_size=8)

Notes
-----
- Tiles are independent; `workers > 1` computes them on a thread pool and
  joins before blending.
- A tile with no pixels (grid finer than the image) gets an identity LUT and
  a DegenerateTileWarning.
"""

from __future__ import annotations
import math
import sys
import warnings
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import numpy as np

from ..defaults import DEFAULT_CLIP_LIMIT, DEFAULT_TILE_GRID_SIZE
from ..errors import DegenerateTileWarning, InvalidParameter
from .blend import blend_tiles
from .buffers import as_luma
from .clip import clip_histogram
from .lut import build_lut, identity_lut
from .tiles import TileGeometry, tile_geometry, tile_histogram

__all__ = ["check_clip_limit", "tile_lut", "tile_luts", "compute_clahe"]


def check_clip_limit(clip_limit) -> float:
    try:
        c = float(clip_limit)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"clip_limit must be a real number, got {clip_limit!r}") from e
    if not math.isfinite(c):
        raise InvalidParameter(f"clip_limit must be finite, got {clip_limit!r}")
    return c


def tile_lut(luma: np.ndarray, geometry: TileGeometry, row: int, col: int, clip_limit: float) -> np.ndarray:
    """LUT for tile (row, col): histogram, clip, CDF. Identity for empty tiles."""
    n = geometry.pixel_count(row, col)
    if n == 0:
        return identity_lut()
    hist = tile_histogram(luma, geometry.box(row, col))
    return build_lut(clip_histogram(hist, clip_limit, n), n)


def tile_luts(
    luma: np.ndarray,
    geometry: TileGeometry,
    clip_limit: float,
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> np.ndarray:
    """
    LUTs for every tile, shape (grid, grid, 256) uint8.

    Parameters
    ----------
    workers : int or None
        Thread pool size; None or 1 runs sequentially.
    progress : bool
        Show a tqdm bar over tiles.
    """
    n = geometry.grid
    cells = list(geometry.cells())
    empty = [rc for rc in cells if geometry.pixel_count(*rc) == 0]
    if empty:
        warnings.warn(
            f"{len(empty)} of {len(cells)} tiles are empty "
            f"(grid {n}x{n} on {geometry.width}x{geometry.height} image); using identity LUTs.",
            DegenerateTileWarning,
            stacklevel=3,
        )

    def _one(rc: Tuple[int, int]) -> np.ndarray:
        return tile_lut(luma, geometry, rc[0], rc[1], clip_limit)

    pbar = None
    if progress:
        from tqdm import tqdm
        pbar = tqdm(total=len(cells), desc="CLAHE tiles", unit="tile", file=sys.stdout)

    luts = np.empty((n, n, 256), dtype=np.uint8)
    try:
        if workers is not None and int(workers) > 1:
            with ThreadPoolExecutor(max_workers=int(workers)) as pool:
                # map() yields in submission order; the pool exit is the join
                for (row, col), lut in zip(cells, pool.map(_one, cells)):
                    luts[row, col] = lut
                    if pbar: pbar.update(1)
        else:
            for row, col in cells:
                luts[row, col] = _one((row, col))
                if pbar: pbar.update(1)
    finally:
        if pbar: pbar.close()
    return luts


def compute_clahe(
    luma,
    width: int,
    height: int,
    clip_limit: float = DEFAULT_CLIP_LIMIT,
    tile_grid_size: int = DEFAULT_TILE_GRID_SIZE,
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> np.ndarray:
    """
    CLAHE on a single-channel 8-bit image.

    Parameters
    ----------
    luma : array-like
        width*height uint8 samples, flat or (H, W).
    width, height : int
        Image size.
    clip_limit : float
        Contrast limit relative to a flat histogram (practical 1.0–10.0).
        Values <= 0 clip every bin to zero before redistribution.
    tile_grid_size : int
        Tiles per side (>= 1). 1 reduces to global histogram equalization.
    workers : int or None
        Thread pool size for the per-tile stage.
    progress : bool
        Show a tqdm bar over tiles.

    Returns
    -------
    np.ndarray
        (H, W) uint8, same size as the input.

    Raises
    ------
    InvalidBufferLength
        If the buffer size disagrees with width/height.
    InvalidParameter
        If tile_grid_size < 1 or clip_limit is not finite.
    """
    c = check_clip_limit(clip_limit)
    geometry = tile_geometry(width, height, tile_grid_size)
    img = as_luma(luma, width, height)

    luts = tile_luts(img, geometry, c, workers=workers, progress=progress)
    return blend_tiles(img, luts, geometry.tile_width, geometry.tile_height)
