# -*- coding: utf-8 -*-
"""
Lightweight plotting helpers for quick before/after checks.

Functions
---------
- show_pair(before, after, *, titles=("Original","CLAHE"), suptitle=None, show=True)
    Side-by-side display of two images (gray (H, W) or RGB/RGBA (H, W, C)).
"""

from __future__ import annotations
from typing import Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt


def _imshow_args(img: np.ndarray) -> dict:
    """Gray images get a fixed 0..255 gray scale; color images are shown as-is."""
    if img.ndim == 2:
        return {"cmap": "gray", "vmin": 0, "vmax": 255}
    return {}


def show_pair(before: np.ndarray,
              after: np.ndarray,
              *,
              titles: Sequence[str] = ("Original", "CLAHE"),
              suptitle: Optional[str] = None,
              show: bool = True):
    """
    Display two images side-by-side.

    Parameters
    ----------
    before, after : np.ndarray
        (H, W) gray or (H, W, 3|4) uint8 images. Sizes may differ
        (e.g. full-resolution source vs. downsampled preview).
    titles : (str, str)
        Panel titles.
    suptitle : str or None
        Optional figure title.
    show : bool
        Call plt.show(); pass False to only build the figure (saving, tests).

    Returns
    -------
    (fig, axes) : (matplotlib.figure.Figure, np.ndarray[Axes])
    """
    a = np.asarray(before)
    b = np.asarray(after)
    for img in (a, b):
        if not (img.ndim == 2 or (img.ndim == 3 and img.shape[-1] in (3, 4))):
            raise ValueError(f"show_pair expects (H, W) or (H, W, 3|4) images, got {img.shape}.")

    fig, ax = plt.subplots(1, 2, figsize=(10, 4))
    ax[0].imshow(a, **_imshow_args(a))
    ax[1].imshow(b, **_imshow_args(b))

    ax[0].set_title(titles[0]); ax[0].set_axis_off()
    ax[1].set_title(titles[1]); ax[1].set_axis_off()

    if suptitle is not None:
        fig.suptitle(suptitle, y=0.98)

    plt.tight_layout()
    if show:
        plt.show()
    return fig, ax
