"""Tests for colormap construction, builtin palettes and application."""

import numpy as np
import pytest

from clahe_studio.colormap import (
    PALETTES,
    apply_colormap,
    build_colormap,
    get_colormap,
    list_colormaps,
)
from clahe_studio.errors import InvalidBufferLength, InvalidParameter


# ------------------------------- build -------------------------------------- #

@pytest.mark.parametrize("name", list(PALETTES))
def test_builtin_endpoints_match_control_points(name):
    pts = PALETTES[name].control_points
    table = build_colormap(pts)
    assert table.shape == (256, 3)
    assert table.dtype == np.uint8
    assert tuple(table[0]) == tuple(pts[0][1])
    assert tuple(table[255]) == tuple(pts[-1][1])


def test_random_lists_endpoints(rng):
    for _ in range(25):
        k = int(rng.integers(0, 6))
        inner = sorted(rng.uniform(0, 1, size=k).tolist())
        positions = [0.0] + inner + [1.0]
        colors = [tuple(int(c) for c in rng.integers(0, 256, size=3)) for _ in positions]
        table = build_colormap(list(zip(positions, colors)))
        assert tuple(table[0]) == colors[0]
        assert tuple(table[255]) == colors[-1]


def test_build_is_idempotent():
    pts = PALETTES["jet"].control_points
    a = build_colormap(pts)
    b = build_colormap(pts)
    np.testing.assert_array_equal(a, b)
    assert a is not b


def test_grayscale_is_identity():
    g = build_colormap(PALETTES["grayscale"].control_points)
    ramp = np.arange(256, dtype=np.uint8)
    np.testing.assert_array_equal(g, np.stack([ramp, ramp, ramp], axis=-1))


def test_linear_interpolation():
    table = build_colormap([(0.0, (0, 255, 255)), (1.0, (255, 0, 255))])
    assert tuple(table[100]) == (100, 155, 255)


def test_outside_range_clamps_to_endpoints():
    a, b = (10, 20, 30), (200, 210, 220)
    table = build_colormap([(0.25, a), (0.75, b)])
    assert tuple(table[0]) == a
    assert tuple(table[51]) == a      # p = 0.2
    assert tuple(table[204]) == b     # p = 0.8
    assert tuple(table[255]) == b


def test_zero_width_bracket_uses_first_pair():
    A, B, C, D = (0, 0, 0), (100, 0, 0), (0, 100, 0), (0, 0, 100)
    table = build_colormap([(0.0, A), (0.2, B), (0.2, C), (1.0, D)])
    assert tuple(table[51]) == B      # p = 0.2 closes the first pair at t = 1
    assert tuple(table[52]) == (0, 100, 0)  # next pair starts at C, not B


def test_single_point_is_constant():
    table = build_colormap([(0.5, (7, 8, 9))])
    assert np.all(table == np.array([7, 8, 9], dtype=np.uint8))


@pytest.mark.parametrize("pts", [
    [],
    [(0.5, (0, 0, 0)), (0.2, (1, 1, 1))],
    [(-0.1, (0, 0, 0)), (1.0, (1, 1, 1))],
    [(0.0, (0, 0, 0)), (float("nan"), (1, 1, 1))],
    [(0.0, (0, 0, 300)), (1.0, (1, 1, 1))],
    [(0.0, (0, 0))],
    [0.0],
])
def test_bad_control_points(pts):
    with pytest.raises(InvalidParameter):
        build_colormap(pts)


# ------------------------------- palettes ----------------------------------- #

def test_list_colormaps_order():
    assert list_colormaps() == [
        "grayscale", "viridis", "plasma", "inferno", "magma", "copper", "jet", "hot", "cool",
    ]


def test_get_colormap_is_cached_and_read_only():
    t1 = get_colormap("viridis")
    t2 = get_colormap("viridis")
    assert t1 is t2
    assert tuple(t1[0]) == (68, 1, 84)
    assert tuple(t1[255]) == (253, 231, 37)
    with pytest.raises(ValueError):
        t1[0, 0] = 0


def test_unknown_colormap():
    with pytest.raises(InvalidParameter):
        get_colormap("rainbow-unicorn")


# ------------------------------- apply -------------------------------------- #

def test_apply_alpha_always_opaque(rng):
    luma = rng.integers(0, 256, size=(13, 11), dtype=np.uint8)
    for name in list_colormaps():
        out = apply_colormap(luma, 11, 13, get_colormap(name))
        assert out.shape == (13, 11, 4)
        assert out.dtype == np.uint8
        assert np.all(out[..., 3] == 255)


def test_apply_looks_up_rgb(rng):
    luma = rng.integers(0, 256, size=(6, 9), dtype=np.uint8)
    table = get_colormap("hot")
    out = apply_colormap(luma.ravel(), 9, 6, table)
    np.testing.assert_array_equal(out[..., :3], table[luma])


def test_apply_accepts_palette_name():
    luma = np.array([[0, 255]], dtype=np.uint8)
    out = apply_colormap(luma, 2, 1, "cool")
    assert out[0, 0].tolist() == [0, 255, 255, 255]
    assert out[0, 1].tolist() == [255, 0, 255, 255]


def test_apply_rejects_bad_table():
    luma = np.zeros((2, 2), dtype=np.uint8)
    with pytest.raises(InvalidParameter):
        apply_colormap(luma, 2, 2, np.zeros((255, 3), dtype=np.uint8))


def test_apply_rejects_bad_length():
    with pytest.raises(InvalidBufferLength):
        apply_colormap(np.zeros(5, dtype=np.uint8), 2, 2, get_colormap("grayscale"))
