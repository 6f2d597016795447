"""Tests for RGBA -> luma conversion."""

import numpy as np
import pytest

from clahe_studio.errors import InvalidBufferLength
from clahe_studio.filters import to_grayscale


@pytest.mark.parametrize("v", [0, 128, 255])
def test_uniform_gray_keeps_value(v):
    rgba = np.full((5, 7, 4), v, dtype=np.uint8)
    rgba[..., 3] = 17
    out = to_grayscale(rgba, 7, 5)
    assert out.shape == (5, 7)
    assert out.dtype == np.uint8
    assert np.all(out == v)


def test_primary_weights():
    px = np.array([
        255, 0, 0, 255,
        0, 255, 0, 255,
        0, 0, 255, 255,
        255, 255, 255, 0,
    ], dtype=np.uint8)
    out = to_grayscale(px, 4, 1)
    assert out.tolist() == [[76, 150, 29, 255]]


def test_alpha_is_ignored(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    opaque = gradient_rgba.copy()
    opaque[..., 3] = 255
    np.testing.assert_array_equal(
        to_grayscale(gradient_rgba, w, h), to_grayscale(opaque, w, h)
    )


def test_flat_and_shaped_buffers_agree(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    np.testing.assert_array_equal(
        to_grayscale(gradient_rgba.ravel(), w, h), to_grayscale(gradient_rgba, w, h)
    )


def test_bad_length_raises():
    with pytest.raises(InvalidBufferLength) as exc:
        to_grayscale(np.zeros(4 * 4 * 4 - 1, dtype=np.uint8), 4, 4)
    assert isinstance(exc.value, ValueError)
    assert exc.value.actual == 63


def test_zero_dimension_raises():
    with pytest.raises(InvalidBufferLength):
        to_grayscale(np.zeros(0, dtype=np.uint8), 0, 0)
