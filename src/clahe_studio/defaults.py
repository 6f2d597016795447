"""Central place for clahe_studio default settings."""

# CLAHE parameters
DEFAULT_CLIP_LIMIT: float = 2.0
DEFAULT_TILE_GRID_SIZE: int = 8

# Interactive slider ranges (clip limit, tile grid, preview size)
MIN_CLIP_LIMIT: float = 1.0
MAX_CLIP_LIMIT: float = 10.0
CLIP_LIMIT_STEP: float = 0.1
MIN_TILE_GRID_SIZE: int = 2
MAX_TILE_GRID_SIZE: int = 16

# Colorization
DEFAULT_COLORMAP: str = "grayscale"

# Preview pass: longest side of the downsampled image
DEFAULT_PREVIEW_MAX: int = 1024
MIN_PREVIEW_MAX: int = 256
MAX_PREVIEW_MAX: int = 2048
PREVIEW_MAX_STEP: int = 128

# Tile workers; None = sequential
DEFAULT_NUM_WORKERS: int | None = None

# Export
OUTPUT_PREFIX: str = "clahe_"
FALLBACK_OUTPUT_NAME: str = "clahe_processed.png"
