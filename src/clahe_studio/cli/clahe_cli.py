# --- file: clahe_studio/cli/clahe_cli.py ---
"""
Batch runner: read → CLAHE (preview + full resolution) → colormap → PNG

Features
--------
- Presets supply (clip limit, tile grid, colormap); explicit flags override.
- Preview and full-resolution passes run concurrently; the full-resolution
  result is what gets written.
- Optional thread pool over tiles (--workers) and tile progress bars.
- Optional grayscale CLAHE output and a before/after preview figure.

Examples
--------
python -m clahe_studio.cli.clahe_cli ^
  --input "D:/scans/*.png" ^
  --outdir "D:/scans/_clahe" ^
  --preset medical --tile-grid 12 ^
  --workers 4 --save-gray

Outputs
-------
clahe_<name>.png        - colorized full-resolution result
<name>_clahe_gray.png   - grayscale CLAHE result (if --save-gray)
<name>_compare.png      - before/after preview figure (if --show)
"""

from __future__ import annotations
import argparse
import glob
import os
from typing import Iterable, Optional

from clahe_studio.colormap import list_colormaps
from clahe_studio.defaults import DEFAULT_PREVIEW_MAX
from clahe_studio.errors import ClaheError
from clahe_studio.io import read_rgba, write_rgba
from clahe_studio.pipeline import ClaheRequest, export_rgba, output_name, process_request
from clahe_studio.presets import ClaheParams, get_preset, list_presets


# ------------------------------- helpers ------------------------------------ #

def _basename_noext(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def resolve_settings(
    preset: str = "default",
    clip_limit: Optional[float] = None,
    tile_grid: Optional[int] = None,
    colormap: Optional[str] = None,
) -> tuple[ClaheParams, str]:
    """Start from a preset and apply explicit overrides."""
    p = get_preset(preset)
    params = ClaheParams(
        clip_limit=p.params.clip_limit if clip_limit is None else clip_limit,
        tile_grid_size=p.params.tile_grid_size if tile_grid is None else tile_grid,
    )
    return params, (p.colormap if colormap is None else colormap)


# ------------------------------- core --------------------------------------- #

def process_one(
    path: str,
    outdir: str,
    *,
    params: ClaheParams,
    colormap: str,
    preview_max: int = DEFAULT_PREVIEW_MAX,
    workers: Optional[int] = None,
    save_gray: bool = False,
    show: bool = False,
) -> str:
    """Process a single image file; returns the path of the colorized output."""
    os.makedirs(outdir, exist_ok=True)
    base = _basename_noext(path)

    rgba, w, h = read_rgba(path, verbose=True)
    req = ClaheRequest(rgba, w, h, params=params, colormap=colormap, preview_max=preview_max)
    res = process_request(req, workers=workers, verbose=True)

    out_path = write_rgba(os.path.join(outdir, output_name(path)), export_rgba(res), verbose=True)

    if save_gray:
        write_rgba(os.path.join(outdir, f"{base}_clahe_gray.png"), res.luma, verbose=True)

    if show:
        from clahe_studio.utils import show_pair
        fig, _ = show_pair(
            rgba, res.preview,
            titles=("Original", f"CLAHE ({colormap})"),
            suptitle=f"{base} | clip={res.params.clip_limit:g} grid={res.params.tile_grid_size}",
            show=False,
        )
        fig_path = os.path.join(outdir, f"{base}_compare.png")
        fig.savefig(fig_path, dpi=100)
        import matplotlib.pyplot as plt
        plt.close(fig)
        print(f"  -> saved {fig_path}")

    print(f"[OK] {path}")
    return out_path


def run_clahe(
    pattern: str,
    outdir: str,
    *,
    preset: str = "default",
    clip_limit: Optional[float] = None,
    tile_grid: Optional[int] = None,
    colormap: Optional[str] = None,
    preview_max: int = DEFAULT_PREVIEW_MAX,
    workers: Optional[int] = None,
    save_gray: bool = False,
    show: bool = False,
) -> list[str]:
    """Process every file matching `pattern`; returns the written paths."""
    files = sorted(glob.glob(pattern))
    if not files:
        raise SystemExit(f"No files match: {pattern}")

    params, cmap = resolve_settings(preset, clip_limit, tile_grid, colormap)
    print(f"[clahe] files={len(files)} outdir={outdir} preset={preset} "
          f"clip={params.clip_limit:g} grid={params.tile_grid_size} cmap={cmap}")

    written = []
    for f in files:
        try:
            written.append(process_one(
                f, outdir,
                params=params, colormap=cmap, preview_max=preview_max,
                workers=workers, save_gray=save_gray, show=show,
            ))
        except ClaheError as e:
            # bad parameters fail every file the same way
            raise SystemExit(f"[error] {e}") from e
        except (OSError, ValueError) as e:
            print(f"[skip] {f}: {e}")
    return written


# ------------------------------- CLI ---------------------------------------- #

def main(argv: Iterable[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="CLAHE contrast enhancement with false-color palettes.")
    ap.add_argument("--input", required=True, help="Glob for input images, e.g. D:/scans/*.png")
    ap.add_argument("--outdir", required=True, help="Output directory")

    # parameters
    ap.add_argument("--preset", default="default", choices=list_presets(), help="Starting parameter set")
    ap.add_argument("--clip-limit", type=float, default=None, help="Contrast limit (1.0-10.0); overrides preset")
    ap.add_argument("--tile-grid", type=int, default=None, help="Tiles per side (2-16); overrides preset")
    ap.add_argument("--colormap", default=None, choices=list_colormaps(), help="Palette; overrides preset")

    # performance / outputs
    ap.add_argument("--preview-max", type=int, default=DEFAULT_PREVIEW_MAX, help="Longest side of the preview pass")
    ap.add_argument("--workers", type=int, default=0, help="Tile worker threads (0=sequential)")
    ap.add_argument("--save-gray", action="store_true", help="Also save the grayscale CLAHE result")
    ap.add_argument("--show", action="store_true", help="Save a before/after preview figure")

    args = ap.parse_args(list(argv) if argv is not None else None)

    run_clahe(
        args.input, args.outdir,
        preset=args.preset,
        clip_limit=args.clip_limit,
        tile_grid=args.tile_grid,
        colormap=args.colormap,
        preview_max=args.preview_max,
        workers=(args.workers if args.workers > 1 else None),
        save_gray=args.save_gray,
        show=args.show,
    )


if __name__ == "__main__":
    main()
