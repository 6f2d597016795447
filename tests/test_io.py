"""Tests for image reading and writing."""

import cv2
import numpy as np
import pytest
import tifffile

from clahe_studio.io import read_rgba, write_rgba


@pytest.mark.parametrize("name", ["img.png", "img.tif"])
def test_rgba_roundtrip(tmp_path, gradient_rgba, name):
    path = write_rgba(str(tmp_path / name), gradient_rgba)
    rgba, w, h = read_rgba(path)
    assert (w, h) == (40, 24)
    np.testing.assert_array_equal(rgba, gradient_rgba)


def test_gray_png_is_replicated(tmp_path, dark_luma):
    path = write_rgba(str(tmp_path / "gray.png"), dark_luma)
    rgba, w, h = read_rgba(path)
    assert (w, h) == (37, 29)
    for c in range(3):
        np.testing.assert_array_equal(rgba[..., c], dark_luma)
    assert np.all(rgba[..., 3] == 255)


def test_16bit_png_keeps_top_bits(tmp_path):
    img = (np.arange(64, dtype=np.uint16).reshape(8, 8) * 1000)
    path = str(tmp_path / "deep.png")
    assert cv2.imwrite(path, img)
    rgba, _, _ = read_rgba(path)
    np.testing.assert_array_equal(rgba[..., 0], (img >> 8).astype(np.uint8))


def test_planar_tiff(tmp_path):
    planar = np.zeros((3, 6, 9), dtype=np.uint8)
    planar[0] = 200
    planar[2] = 50
    path = str(tmp_path / "planar.tif")
    tifffile.imwrite(path, planar, photometric="rgb", planarconfig="separate")
    rgba, w, h = read_rgba(path)
    assert (w, h) == (9, 6)
    assert tuple(rgba[0, 0]) == (200, 0, 50, 255)


def test_jpeg_drops_alpha(tmp_path, gradient_rgba):
    flat = gradient_rgba.copy()
    flat[..., :3] = 128
    path = write_rgba(str(tmp_path / "out" / "flat.jpg"), flat)
    rgba, w, h = read_rgba(path)
    assert (w, h) == (40, 24)
    assert np.all(rgba[..., 3] == 255)
    assert np.abs(rgba[..., :3].astype(int) - 128).max() <= 2


def test_write_rejects_rgb(tmp_path):
    with pytest.raises(ValueError):
        write_rgba(str(tmp_path / "x.png"), np.zeros((4, 4, 3), np.uint8))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_rgba(str(tmp_path / "missing.png"))


def test_garbage_file(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(ValueError):
        read_rgba(str(path))


def test_verbose_read(tmp_path, gradient_rgba, capsys):
    path = write_rgba(str(tmp_path / "v.png"), gradient_rgba, verbose=True)
    read_rgba(path, verbose=True)
    out = capsys.readouterr().out
    assert "saved" in out
    assert "[I/O] read 40x24" in out
