# --- file: clahe_studio/colormap/palettes.py ---
"""
Builtin palettes: one authoritative table of control points, labels and
descriptions. Tables are built on first use and cached read-only.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np

from ..errors import InvalidParameter
from .mapping import ControlPoint, build_colormap

__all__ = ["Palette", "PALETTES", "list_colormaps", "get_palette", "get_colormap"]


@dataclass(frozen=True)
class Palette:
    name: str
    label: str
    description: str
    control_points: Tuple[ControlPoint, ...]


PALETTES: dict[str, Palette] = {
    p.name: p
    for p in (
        Palette("grayscale", "Grayscale", "Standard black to white", (
            (0.0, (0, 0, 0)),
            (1.0, (255, 255, 255)),
        )),
        Palette("viridis", "Viridis", "Perceptually uniform, colorblind-friendly", (
            (0.0, (68, 1, 84)),
            (0.25, (59, 82, 139)),
            (0.5, (33, 145, 140)),
            (0.75, (94, 201, 98)),
            (1.0, (253, 231, 37)),
        )),
        Palette("plasma", "Plasma", "High contrast, scientific visualization", (
            (0.0, (13, 8, 135)),
            (0.25, (126, 3, 168)),
            (0.5, (204, 71, 120)),
            (0.75, (248, 149, 64)),
            (1.0, (240, 249, 33)),
        )),
        Palette("inferno", "Inferno", "Dark to bright, heat-like", (
            (0.0, (0, 0, 4)),
            (0.25, (87, 16, 110)),
            (0.5, (188, 55, 84)),
            (0.75, (249, 142, 9)),
            (1.0, (252, 255, 164)),
        )),
        Palette("magma", "Magma", "Similar to inferno, more purple", (
            (0.0, (0, 0, 4)),
            (0.25, (81, 18, 124)),
            (0.5, (183, 55, 121)),
            (0.75, (254, 136, 111)),
            (1.0, (252, 253, 191)),
        )),
        Palette("copper", "Copper", "Warm metallic tones", (
            (0.0, (0, 0, 0)),
            (0.5, (159, 99, 63)),
            (0.8, (255, 159, 101)),
            (1.0, (255, 199, 127)),
        )),
        Palette("jet", "Jet", "Classic rainbow (not perceptually uniform)", (
            (0.0, (0, 0, 127)),
            (0.1, (0, 0, 255)),
            (0.35, (0, 255, 255)),
            (0.5, (0, 255, 0)),
            (0.65, (255, 255, 0)),
            (0.9, (255, 0, 0)),
            (1.0, (127, 0, 0)),
        )),
        Palette("hot", "Hot", "Black-red-yellow-white thermal", (
            (0.0, (11, 0, 0)),
            (0.35, (255, 0, 0)),
            (0.65, (255, 255, 0)),
            (1.0, (255, 255, 255)),
        )),
        Palette("cool", "Cool", "Cyan to magenta gradient", (
            (0.0, (0, 255, 255)),
            (1.0, (255, 0, 255)),
        )),
    )
}


def list_colormaps() -> list[str]:
    """Builtin palette names in display order."""
    return list(PALETTES)


def get_palette(name: str) -> Palette:
    try:
        return PALETTES[name]
    except KeyError:
        raise InvalidParameter(
            f"Unknown colormap {name!r}; choose one of {', '.join(PALETTES)}."
        ) from None


@lru_cache(maxsize=None)
def _cached_table(name: str) -> np.ndarray:
    table = build_colormap(get_palette(name).control_points)
    table.flags.writeable = False
    return table


def get_colormap(name: str) -> np.ndarray:
    """(256, 3) uint8 table of a builtin palette; shared and read-only."""
    return _cached_table(name)
