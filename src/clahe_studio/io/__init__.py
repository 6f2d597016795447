# -*- coding: utf-8 -*-
"""Public I/O API for clahe_studio.io."""
from .readers import read_rgba
from .writers import write_rgba
from .formats import IMAGE_EXTENSIONS

__all__ = [
    "read_rgba",
    "write_rgba",
    "IMAGE_EXTENSIONS",
]
