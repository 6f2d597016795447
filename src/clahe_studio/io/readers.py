# -*- coding: utf-8 -*-
"""
readers.py — image decoding into 8-bit RGBA (H, W, 4).
TIFF goes through tifffile, everything else through OpenCV.
"""
from __future__ import annotations
import os
from typing import Tuple

import cv2
import numpy as np
import tifffile as tiff

from .formats import _is_tiff, _to_rgba

__all__ = ["read_rgba"]


def _read_tiff(path: str) -> np.ndarray:
    a = tiff.imread(path)
    # multi-page / stacked series: keep the first image
    while a.ndim > 3 or (a.ndim == 3 and a.shape[-1] > 4 and a.shape[0] > 4):
        a = a[0]
    return a


def _read_cv2(path: str) -> np.ndarray:
    a = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if a is None:
        raise ValueError(f"Failed to decode image: {path}")
    if a.ndim == 3 and a.shape[-1] == 3:
        a = cv2.cvtColor(a, cv2.COLOR_BGR2RGB)
    elif a.ndim == 3 and a.shape[-1] == 4:
        a = cv2.cvtColor(a, cv2.COLOR_BGRA2RGBA)
    return a


def read_rgba(path: str, *, verbose: bool = False) -> Tuple[np.ndarray, int, int]:
    """
    Decode an image file to RGBA.

    Parameters
    ----------
    path : str
        PNG/JPEG/BMP/WebP (OpenCV) or TIFF (tifffile).
    verbose : bool
        Print a one-line summary.

    Returns
    -------
    (rgba, width, height)
        rgba is (H, W, 4) uint8; gray inputs are replicated, 16-bit inputs
        keep their top 8 bits, missing alpha is 255.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ValueError
        If the file cannot be decoded or has an unsupported layout.
    """
    path = os.path.abspath(path)
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    raw = _read_tiff(path) if _is_tiff(path) else _read_cv2(path)
    rgba = _to_rgba(raw)
    h, w = rgba.shape[:2]
    if verbose:
        print(f"[I/O] read {w}x{h} ({raw.dtype}, {raw.shape}):", path)
    return rgba, int(w), int(h)
