"""
clahe_studio.filters
====================

Contrast enhancement of 8-bit luma by tiled, contrast-limited histogram
equalization.

Modules
-------
grayscale : RGBA -> luma (Rec. 601 weights).
tiles     : Tile grid layout and per-tile 256-bin histograms.
clip      : Histogram clipping and excess redistribution.
lut       : CDF -> equalization lookup table.
blend     : Bilinear blending of tile LUTs between tile centers.
contrast  : CLAHE entry point tying the stages together.

Design
------
- Every stage is a pure function of its arguments; no state survives a call.
- Tiles (histogram -> clip -> LUT) are independent and may run on a thread
  pool; blending starts after all LUTs are done.

Typical defaults
----------------
- CLAHE: clip_limit ≈ 2.0 (1.0–10.0), tile grid ≈ 8×8 (2–16).
"""

# Short imports for public API
from .grayscale import to_grayscale
from .tiles import TileGeometry, tile_geometry, tile_histogram, tile_histograms
from .clip import clip_histogram, clip_threshold
from .lut import build_lut, identity_lut
from .blend import blend_tiles
from .contrast import compute_clahe, tile_luts

# Modules export
import importlib as _importlib
grayscale = _importlib.import_module(".grayscale", __name__)
tiles = _importlib.import_module(".tiles", __name__)
clip = _importlib.import_module(".clip", __name__)
lut = _importlib.import_module(".lut", __name__)
blend = _importlib.import_module(".blend", __name__)
contrast = _importlib.import_module(".contrast", __name__)

__all__ = [
    # functions
    "to_grayscale",
    "TileGeometry",
    "tile_geometry",
    "tile_histogram",
    "tile_histograms",
    "clip_histogram",
    "clip_threshold",
    "build_lut",
    "identity_lut",
    "blend_tiles",
    "compute_clahe",
    "tile_luts",
    # modules
    "grayscale",
    "tiles",
    "clip",
    "lut",
    "blend",
    "contrast",
]
