"""Tests for the request/response pipeline."""

import numpy as np
import pytest

from clahe_studio.colormap import apply_colormap, get_colormap
from clahe_studio.errors import InvalidBufferLength, InvalidParameter
from clahe_studio.filters import compute_clahe, to_grayscale
from clahe_studio.pipeline import (
    ClaheRequest,
    downsample_rgba,
    enhance,
    enhance_luma,
    export_rgba,
    output_name,
    process_request,
)
from clahe_studio.presets import ClaheParams


def test_downsample_keeps_small_images(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    out, ow, oh = downsample_rgba(gradient_rgba.ravel(), w, h, 64)
    assert (ow, oh) == (w, h)
    np.testing.assert_array_equal(out, gradient_rgba)


def test_downsample_scales_longest_side(gradient_rgba):
    h, w = gradient_rgba.shape[:2]  # 24 x 40
    out, ow, oh = downsample_rgba(gradient_rgba, w, h, 16)
    # scale = min(16/40, 16/24) = 0.4
    assert (ow, oh) == (16, 10)
    assert out.shape == (10, 16, 4)
    assert out.dtype == np.uint8


def test_downsample_rejects_bad_size(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    with pytest.raises(InvalidParameter):
        downsample_rgba(gradient_rgba, w, h, 0)


def test_enhance_composes_stages(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    params = ClaheParams(2.5, 4)
    expected_luma = compute_clahe(to_grayscale(gradient_rgba, w, h), w, h, 2.5, 4)
    np.testing.assert_array_equal(enhance_luma(gradient_rgba, w, h, params), expected_luma)
    np.testing.assert_array_equal(
        enhance(gradient_rgba, w, h, params, "magma"),
        apply_colormap(expected_luma, w, h, get_colormap("magma")),
    )


def test_process_request_preview_and_full(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    req = ClaheRequest(gradient_rgba, w, h, ClaheParams(2.0, 4), colormap="viridis", preview_max=20)
    res = process_request(req)

    assert res.preview_size == (20, 12)
    assert res.preview.shape == (12, 20, 4)
    assert np.all(res.preview[..., 3] == 255)
    assert res.luma.shape == (h, w)
    assert (res.width, res.height) == (w, h)
    np.testing.assert_array_equal(res.luma, enhance_luma(gradient_rgba, w, h, ClaheParams(2.0, 4)))


def test_preview_equals_full_when_image_fits(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    req = ClaheRequest(gradient_rgba, w, h, ClaheParams(3.0, 2), colormap="hot")
    res = process_request(req, workers=2)
    np.testing.assert_array_equal(res.preview, export_rgba(res))


def test_export_recolors_without_recompute(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    res = process_request(ClaheRequest(gradient_rgba, w, h, colormap="grayscale"))
    jet = export_rgba(res, "jet")
    np.testing.assert_array_equal(jet, apply_colormap(res.luma, w, h, get_colormap("jet")))
    gray = export_rgba(res)
    np.testing.assert_array_equal(gray[..., 0], res.luma)


def test_process_request_verbose(gradient_rgba, capsys):
    h, w = gradient_rgba.shape[:2]
    process_request(ClaheRequest(gradient_rgba, w, h), verbose=True)
    out = capsys.readouterr().out
    assert "[pipeline]" in out
    assert f"full {w}x{h}" in out


def test_process_request_fails_fast(gradient_rgba):
    h, w = gradient_rgba.shape[:2]
    with pytest.raises(InvalidParameter):
        process_request(ClaheRequest(gradient_rgba, w, h, ClaheParams(tile_grid_size=0)))
    with pytest.raises(InvalidParameter):
        process_request(ClaheRequest(gradient_rgba, w, h, colormap="nope"))
    with pytest.raises(InvalidBufferLength):
        process_request(ClaheRequest(gradient_rgba, w + 1, h))


def test_output_name():
    assert output_name("/data/scan.01.png") == "clahe_scan.01.png"
    assert output_name("photo.JPG") == "clahe_photo.png"
    assert output_name(None) == "clahe_processed.png"
