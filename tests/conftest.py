"""Test configuration for clahe_studio."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def gradient_rgba():
    """40x24 RGBA image: horizontal red ramp, vertical green ramp, noisy alpha."""
    h, w = 24, 40
    x = np.linspace(0, 255, w)[None, :].repeat(h, axis=0)
    y = np.linspace(0, 255, h)[:, None].repeat(w, axis=1)
    img = np.empty((h, w, 4), dtype=np.uint8)
    img[..., 0] = x.astype(np.uint8)
    img[..., 1] = y.astype(np.uint8)
    img[..., 2] = 64
    img[..., 3] = (np.arange(h * w).reshape(h, w) % 256).astype(np.uint8)
    return img


@pytest.fixture
def dark_luma(rng):
    """Low-contrast 37x29 luma concentrated in 20..60."""
    return rng.integers(20, 60, size=(29, 37), dtype=np.uint8)
