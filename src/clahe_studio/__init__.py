# --- file: clahe_studio/__init__.py ---
__all__ = [
    "cli",
    "colormap",
    "defaults",
    "errors",
    "filters",
    "io",
    "pipeline",
    "presets",
    "utils",
]

__version__ = "0.1.0"
