# --- file: clahe_studio/pipeline.py ---
"""
Request/response pipeline around the CLAHE core: RGBA -> luma -> CLAHE -> colormap.

Features
--------
- Explicit request and result values; nothing is kept between calls.
- Preview pass on a downsampled copy and full-resolution pass run
  concurrently; they share no buffers.
- The full-resolution result is kept as luma so it can be recolored with any
  palette at export time without recomputing CLAHE.

Typical usage
-------------
>>> req = ClaheRequest(pixels, w, h, ClaheParams(2.5, 8), colormap="viridis")
>>> res = process_request(req)
>>> res.preview          # (h', w', 4) RGBA, longest side <= req.preview_max
>>> export_rgba(res)     # (h, w, 4) RGBA at full resolution
"""

from __future__ import annotations
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from .colormap import apply_colormap, check_table, get_colormap
from .defaults import DEFAULT_COLORMAP, DEFAULT_PREVIEW_MAX, FALLBACK_OUTPUT_NAME, OUTPUT_PREFIX
from .errors import InvalidParameter
from .filters import compute_clahe, to_grayscale
from .filters.buffers import as_rgba
from .presets import ClaheParams

__all__ = [
    "ClaheRequest",
    "ClaheResult",
    "downsample_rgba",
    "enhance_luma",
    "enhance",
    "process_request",
    "export_rgba",
    "output_name",
]

Colormap = Union[str, np.ndarray]


@dataclass(frozen=True)
class ClaheRequest:
    """One processing request.

    Attributes
    ----------
    pixels : np.ndarray
        Source RGBA, width*height*4 uint8 samples (flat or (H, W, 4)).
    width, height : int
        Source size.
    params : ClaheParams
        CLAHE parameters.
    colormap : str or np.ndarray
        Palette name or (256, 3) table used for the preview and default export.
    preview_max : int
        Longest side of the preview pass.
    """
    pixels: np.ndarray
    width: int
    height: int
    params: ClaheParams = field(default_factory=ClaheParams)
    colormap: Colormap = DEFAULT_COLORMAP
    preview_max: int = DEFAULT_PREVIEW_MAX


@dataclass
class ClaheResult:
    """Result of `process_request`.

    Attributes
    ----------
    preview : np.ndarray
        Colorized preview, (preview_height, preview_width, 4) uint8.
    luma : np.ndarray
        Full-resolution CLAHE output, (height, width) uint8.
    width, height : int
        Full-resolution size.
    params : ClaheParams
        Validated parameters that produced this result.
    colormap : str or np.ndarray
        Colormap used for the preview.
    """
    preview: np.ndarray
    luma: np.ndarray
    width: int
    height: int
    params: ClaheParams
    colormap: Colormap = DEFAULT_COLORMAP

    @property
    def preview_size(self) -> Tuple[int, int]:
        """(width, height) of the preview."""
        return int(self.preview.shape[1]), int(self.preview.shape[0])


def _resolve_colormap(colormap: Colormap) -> np.ndarray:
    return get_colormap(colormap) if isinstance(colormap, str) else check_table(colormap)


def downsample_rgba(pixels, width: int, height: int, max_dimension: int) -> Tuple[np.ndarray, int, int]:
    """
    Shrink an RGBA image so that neither side exceeds `max_dimension`.

    Images that already fit are returned as-is (reshaped to (H, W, 4)).
    Otherwise scale = min(max/w, max/h) and the new size is rounded, using
    area interpolation.

    Returns
    -------
    (rgba, width, height)
    """
    rgba = as_rgba(pixels, width, height)
    max_dimension = int(max_dimension)
    if max_dimension < 1:
        raise InvalidParameter(f"max_dimension must be >= 1, got {max_dimension}")
    if width <= max_dimension and height <= max_dimension:
        return rgba, int(width), int(height)

    scale = min(max_dimension / width, max_dimension / height)
    new_w = max(1, int(round(width * scale)))
    new_h = max(1, int(round(height * scale)))
    small = cv2.resize(np.ascontiguousarray(rgba), (new_w, new_h), interpolation=cv2.INTER_AREA)
    return small, new_w, new_h


def enhance_luma(
    pixels,
    width: int,
    height: int,
    params: ClaheParams,
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> np.ndarray:
    """RGBA -> luma -> CLAHE; returns (H, W) uint8."""
    gray = to_grayscale(pixels, width, height)
    return compute_clahe(
        gray, width, height,
        clip_limit=params.clip_limit,
        tile_grid_size=params.tile_grid_size,
        workers=workers,
        progress=progress,
    )


def enhance(
    pixels,
    width: int,
    height: int,
    params: ClaheParams,
    colormap: Colormap = DEFAULT_COLORMAP,
    *,
    workers: Optional[int] = None,
    progress: bool = False,
) -> np.ndarray:
    """Full pipeline on one image; returns (H, W, 4) RGBA."""
    table = _resolve_colormap(colormap)
    luma = enhance_luma(pixels, width, height, params, workers=workers, progress=progress)
    return apply_colormap(luma, width, height, table)


def process_request(
    request: ClaheRequest,
    *,
    workers: Optional[int] = None,
    verbose: bool = False,
) -> ClaheResult:
    """
    Run the preview and full-resolution passes for one request.

    Parameters and colormap are validated before any pixel work, so a bad
    request fails without partial output.

    Parameters
    ----------
    request : ClaheRequest
    workers : int or None
        Tile thread-pool size passed to each pass.
    verbose : bool
        Print a one-line summary per pass.
    """
    params = request.params.validated()
    table = _resolve_colormap(request.colormap)
    src = as_rgba(request.pixels, request.width, request.height)
    W, H = int(request.width), int(request.height)

    small, pw, ph = downsample_rgba(src, W, H, request.preview_max)
    if verbose:
        print(f"[pipeline] clip={params.clip_limit:g} grid={params.tile_grid_size} "
              f"| preview {pw}x{ph} | full {W}x{H}")

    with ThreadPoolExecutor(max_workers=2) as pool:
        fut_preview = pool.submit(enhance, small, pw, ph, params, table, workers=workers)
        fut_full = pool.submit(enhance_luma, src, W, H, params, workers=workers)
        preview = fut_preview.result()
        luma = fut_full.result()

    if verbose:
        print("[pipeline] done")
    return ClaheResult(
        preview=preview,
        luma=luma,
        width=W,
        height=H,
        params=params,
        colormap=request.colormap,
    )


def export_rgba(result: ClaheResult, colormap: Optional[Colormap] = None) -> np.ndarray:
    """Colorize the full-resolution luma; defaults to the preview colormap."""
    table = _resolve_colormap(result.colormap if colormap is None else colormap)
    return apply_colormap(result.luma, result.width, result.height, table)


def output_name(source_path: Optional[str] = None) -> str:
    """'clahe_<stem>.png' for a source file, else 'clahe_processed.png'."""
    if not source_path:
        return FALLBACK_OUTPUT_NAME
    stem = os.path.splitext(os.path.basename(source_path))[0]
    return f"{OUTPUT_PREFIX}{stem}.png"
