# --- file: clahe_studio/colormap/mapping.py ---
"""
Colormap construction and application.

build_colormap : control points -> (256, 3) uint8 RGB table
apply_colormap : (H, W) luma + table -> (H, W, 4) RGBA, alpha = 255
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple, Union

import numpy as np

from ..errors import InvalidParameter
from ..filters.buffers import as_luma

__all__ = [
    "ControlPoint",
    "check_control_points",
    "build_colormap",
    "check_table",
    "apply_colormap",
]

RGB = Tuple[int, int, int]
ControlPoint = Tuple[float, RGB]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def check_control_points(control_points: Sequence[ControlPoint]) -> list[tuple[float, RGB]]:
    """
    Normalize control points to [(pos, (r, g, b)), ...].

    Raises
    ------
    InvalidParameter
        Empty list, position outside [0, 1] or not finite, positions not
        ascending, or a color that is not three values in [0, 255].
    """
    pts: list[tuple[float, RGB]] = []
    for item in control_points:
        try:
            pos, color = item
            pos = float(pos)
            r, g, b = (float(c) for c in color)
        except (TypeError, ValueError) as e:
            raise InvalidParameter(f"Malformed control point {item!r}; expected (pos, (r, g, b)).") from e
        if not (math.isfinite(pos) and 0.0 <= pos <= 1.0):
            raise InvalidParameter(f"Control point position must be in [0, 1], got {pos!r}")
        if not all(0.0 <= c <= 255.0 for c in (r, g, b)):
            raise InvalidParameter(f"Control point color must be in [0, 255], got {tuple(color)!r}")
        if pts and pos < pts[-1][0]:
            raise InvalidParameter("Control point positions must be sorted ascending.")
        pts.append((pos, (r, g, b)))
    if not pts:
        raise InvalidParameter("At least one control point is required.")
    return pts


def _bracket(pts: list[tuple[float, RGB]], p: float) -> tuple[tuple[float, RGB], tuple[float, RGB]]:
    """First (lower, upper) pair with lower.pos <= p <= upper.pos, endpoints outside."""
    if p <= pts[0][0]:
        return pts[0], pts[0]
    if p >= pts[-1][0]:
        return pts[-1], pts[-1]
    for lower, upper in zip(pts[:-1], pts[1:]):
        if lower[0] <= p <= upper[0]:
            return lower, upper
    return pts[-1], pts[-1]


def build_colormap(control_points: Sequence[ControlPoint]) -> np.ndarray:
    """
    Piecewise-linear 256-entry RGB table from ordered control points.

    Entry i samples p = i / 255. Inside the control range the first bracketing
    pair is interpolated (t = 0 on a zero-width bracket); outside it the
    nearest endpoint color is used. Channels are rounded half up.

    Parameters
    ----------
    control_points : sequence of (pos, (r, g, b))
        Positions in [0, 1], ascending.

    Returns
    -------
    np.ndarray
        (256, 3) uint8.
    """
    pts = check_control_points(control_points)
    table = np.empty((256, 3), dtype=np.uint8)
    for i in range(256):
        p = i / 255
        (lo_pos, lo_rgb), (hi_pos, hi_rgb) = _bracket(pts, p)
        t = 0.0 if hi_pos == lo_pos else (p - lo_pos) / (hi_pos - lo_pos)
        table[i] = [
            min(255, max(0, _round_half_up(c1 + (c2 - c1) * t)))
            for c1, c2 in zip(lo_rgb, hi_rgb)
        ]
    return table


def check_table(table) -> np.ndarray:
    """Coerce a colormap to a (256, 3) uint8 array or raise InvalidParameter."""
    t = np.asarray(table)
    if t.shape != (256, 3):
        raise InvalidParameter(f"Colormap table must have shape (256, 3), got {t.shape}.")
    if t.dtype != np.uint8:
        if np.any(t < 0) or np.any(t > 255):
            raise InvalidParameter("Colormap table values must be in [0, 255].")
        t = t.astype(np.uint8)
    return t


def apply_colormap(luma, width: int, height: int, table: Union[np.ndarray, str]) -> np.ndarray:
    """
    Colorize 8-bit luma through a 256-entry table.

    Parameters
    ----------
    luma : array-like
        width*height uint8 samples, flat or (H, W).
    width, height : int
        Image size.
    table : np.ndarray or str
        (256, 3) RGB table, or the name of a builtin palette.

    Returns
    -------
    np.ndarray
        (H, W, 4) uint8 RGBA; alpha is always 255.
    """
    if isinstance(table, str):
        from .palettes import get_colormap
        table = get_colormap(table)
    lut = check_table(table)
    img = as_luma(luma, width, height)

    out = np.empty(img.shape + (4,), dtype=np.uint8)
    out[..., :3] = lut[img]
    out[..., 3] = 255
    return out
