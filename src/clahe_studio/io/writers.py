# -*- coding: utf-8 -*-
"""
writers.py — image encoding from RGBA (H, W, 4) or gray (H, W) uint8.
TIFF goes through tifffile, everything else through OpenCV.
"""
from __future__ import annotations
import os

import cv2
import numpy as np
import tifffile as tiff

from .formats import NO_ALPHA_EXTENSIONS, _is_tiff, _to_u8

__all__ = ["write_rgba"]


def write_rgba(path: str, img: np.ndarray, *, compress: bool = True, verbose: bool = False) -> str:
    """
    Encode an RGBA or gray image; the format follows the file extension.

    Parameters
    ----------
    path : str
        Output file; parent directories are created.
    img : np.ndarray
        (H, W, 4) RGBA or (H, W) gray, any numeric dtype (converted to uint8).
    compress : bool
        DEFLATE compression for TIFF output.
    verbose : bool
        Print the saved path.

    Returns
    -------
    str
        Absolute path written.
    """
    a = _to_u8(np.asarray(img))
    if not (a.ndim == 2 or (a.ndim == 3 and a.shape[-1] == 4)):
        raise ValueError(f"Expected (H, W, 4) RGBA or (H, W) gray, got shape {a.shape}.")

    path = os.path.abspath(path)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    if _is_tiff(path):
        if a.ndim == 2:
            tiff.imwrite(path, a, photometric="minisblack",
                         compression=("deflate" if compress else None))
        else:
            tiff.imwrite(path, a, photometric="rgb", extrasamples=(2,),  # unassociated alpha
                         compression=("deflate" if compress else None))
    else:
        if a.ndim == 2:
            out = a
        elif os.path.splitext(path)[1].lower() in NO_ALPHA_EXTENSIONS:
            out = cv2.cvtColor(a, cv2.COLOR_RGBA2BGR)
        else:
            out = cv2.cvtColor(a, cv2.COLOR_RGBA2BGRA)
        if not cv2.imwrite(path, out):
            raise ValueError(f"Failed to encode image: {path}")

    if verbose:
        print(f"  -> saved {path}")
    return path
