"""
clahe_studio.colormap
=====================

False-color rendering of enhanced luma.

Modules
-------
mapping  : Control points -> 256-entry RGB table; table application to luma.
palettes : Builtin named palettes (grayscale, viridis, plasma, ...), cached.

Guidelines
----------
- Colorization is display-only: alpha is always 255 and the input alpha is
  never carried over.
"""

# Re-exports for short imports like:
#   from clahe_studio.colormap import build_colormap, apply_colormap
#   from clahe_studio.colormap import get_colormap, list_colormaps
from .mapping import build_colormap, apply_colormap, check_control_points, check_table
from .palettes import Palette, PALETTES, get_colormap, get_palette, list_colormaps

import importlib as _importlib
mapping = _importlib.import_module(".mapping", __name__)
palettes = _importlib.import_module(".palettes", __name__)

__all__ = [
    # functions
    "build_colormap",
    "apply_colormap",
    "check_control_points",
    "check_table",
    "get_colormap",
    "get_palette",
    "list_colormaps",
    # types / data
    "Palette",
    "PALETTES",
    # modules
    "mapping",
    "palettes",
]
