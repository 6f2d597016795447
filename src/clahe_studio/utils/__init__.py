# -*- coding: utf-8 -*-
"""
clahe_studio.utils
==================

Small visualization utilities used across notebooks/tests.
"""

from .display import show_pair

__all__ = [
    "show_pair",
]
