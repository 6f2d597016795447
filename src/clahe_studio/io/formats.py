# -*- coding: utf-8 -*-
"""
formats.py — shared helpers for image I/O: extension checks and 8-bit RGBA
normalization. No file I/O here — only utilities used by readers and writers.
"""
from __future__ import annotations
import os
import numpy as np

__all__ = [
    "TIFF_EXTENSIONS",
    "NO_ALPHA_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "_is_tiff",
    "_to_u8",
    "_to_rgba",
]

TIFF_EXTENSIONS = (".tif", ".tiff")
NO_ALPHA_EXTENSIONS = (".jpg", ".jpeg")
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".webp", ".gif") + TIFF_EXTENSIONS


def _is_tiff(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in TIFF_EXTENSIONS


def _to_u8(arr: np.ndarray) -> np.ndarray:
    """
    Convert any numeric image to uint8.

    - uint8: unchanged
    - bool: {0, 255}
    - other integers: keep the top 8 bits of the dtype range (uint16 >> 8)
    - floats: assumed in [0, 1], clipped and scaled by 255
    """
    a = np.asarray(arr)
    if a.dtype == np.uint8:
        return a
    if a.dtype == np.bool_:
        return a.astype(np.uint8) * 255
    if np.issubdtype(a.dtype, np.integer):
        info = np.iinfo(a.dtype)
        shift = max(0, info.bits - 8)
        a = np.clip(a.astype(np.int64), 0, info.max) >> shift
        return a.astype(np.uint8)
    a = np.clip(a.astype(np.float32), 0, 1)
    return np.floor(a * 255 + 0.5).astype(np.uint8)


def _to_rgba(arr: np.ndarray) -> np.ndarray:
    """
    Normalize (H, W), (H, W, 1|2|3|4) or planar (C, H, W) images to (H, W, 4) uint8.

    Gray is replicated to RGB; missing alpha is filled with 255.
    """
    a = _to_u8(arr)
    if a.ndim == 3 and a.shape[0] in (1, 2, 3, 4) and a.shape[-1] not in (1, 2, 3, 4):
        a = np.moveaxis(a, 0, -1)  # planar (C, H, W) -> (H, W, C)
    if a.ndim == 2:
        a = a[..., None]
    if a.ndim != 3 or a.shape[-1] not in (1, 2, 3, 4):
        raise ValueError(f"Unsupported image shape {a.shape}; expected (H, W[, C]) with C <= 4.")

    H, W, C = a.shape
    out = np.empty((H, W, 4), dtype=np.uint8)
    if C in (1, 2):
        out[..., :3] = a[..., :1]
        out[..., 3] = a[..., 1] if C == 2 else 255
    else:
        out[..., :3] = a[..., :3]
        out[..., 3] = a[..., 3] if C == 4 else 255
    return out
