"""
clahe_studio.cli
================

Command-line entrypoint for batch CLAHE processing (clahe_cli).

Re-exports
----------
from clahe_studio.cli import (
    run_clahe, clahe_main, process_one,
    # and the module:
    clahe_cli,
)
"""

# short imports, e.g.:
#   from clahe_studio.cli import run_clahe
from .clahe_cli import run_clahe as run_clahe, process_one as process_one, main as clahe_main

# also expose the submodule itself
import importlib as _importlib
clahe_cli = _importlib.import_module(".clahe_cli", __name__)

__all__ = [
    # functions
    "run_clahe", "process_one", "clahe_main",
    # modules
    "clahe_cli",
]
