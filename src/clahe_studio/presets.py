# --- file: clahe_studio/presets.py ---
"""
CLAHE parameter sets and the preset catalog.

Each preset is a plain (clip_limit, tile_grid_size, colormap) triple with a
name and description; nothing here touches pixels.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from .defaults import DEFAULT_CLIP_LIMIT, DEFAULT_COLORMAP, DEFAULT_TILE_GRID_SIZE
from .filters.contrast import check_clip_limit
from .filters.tiles import check_tile_grid_size

__all__ = ["ClaheParams", "Preset", "PRESETS", "list_presets", "get_preset"]


@dataclass(frozen=True)
class ClaheParams:
    """CLAHE parameters for one call.

    Attributes
    ----------
    clip_limit : float
        Contrast limit, practical range 1.0–10.0.
    tile_grid_size : int
        Tiles per side, practical range 2–16.
    """
    clip_limit: float = DEFAULT_CLIP_LIMIT
    tile_grid_size: int = DEFAULT_TILE_GRID_SIZE

    def validated(self) -> "ClaheParams":
        """Return a copy with normalized types; raise InvalidParameter if out of domain."""
        return replace(
            self,
            clip_limit=check_clip_limit(self.clip_limit),
            tile_grid_size=check_tile_grid_size(self.tile_grid_size),
        )


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    description: str
    params: ClaheParams
    colormap: str = DEFAULT_COLORMAP


PRESETS: tuple[Preset, ...] = (
    Preset("default", "Default", "Balanced settings for general use",
           ClaheParams(2.0, 8), "grayscale"),
    Preset("portrait", "Portrait", "Gentle enhancement for faces, preserves skin tones",
           ClaheParams(1.5, 8), "grayscale"),
    Preset("landscape", "Landscape", "Enhanced detail for outdoor scenes",
           ClaheParams(2.5, 8), "viridis"),
    Preset("night", "Night / Low Light", "Maximum enhancement for dark images",
           ClaheParams(4.0, 4), "inferno"),
    Preset("medical", "Medical / X-Ray", "Optimized for medical imaging",
           ClaheParams(3.0, 8), "hot"),
    Preset("scientific", "Scientific", "High contrast for data visualization",
           ClaheParams(3.5, 16), "plasma"),
    Preset("subtle", "Subtle", "Minimal enhancement, natural look",
           ClaheParams(1.0, 8), "grayscale"),
    Preset("dramatic", "Dramatic", "High contrast, artistic effect",
           ClaheParams(5.0, 4), "magma"),
)


def list_presets() -> list[str]:
    return [p.id for p in PRESETS]


def get_preset(preset_id: str) -> Preset:
    """Look up a preset by id; KeyError lists the known ids."""
    for p in PRESETS:
        if p.id == preset_id:
            return p
    raise KeyError(f"Unknown preset {preset_id!r}; choose one of {', '.join(list_presets())}.")
