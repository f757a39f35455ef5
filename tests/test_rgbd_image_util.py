from __future__ import annotations

import cv2
import numpy as np
import pytest

from smg.rgbd import Image, RGBDImage, RGBDImageUtil


def test_load_rgbd_image(tmp_path):
    colour = np.full((24, 32, 3), 100, dtype=np.uint8)
    depth = np.full((24, 32), 1500, dtype=np.uint16)
    colour_file = str(tmp_path / "colour.png")
    depth_file = str(tmp_path / "depth.png")
    assert cv2.imwrite(colour_file, colour)
    assert cv2.imwrite(depth_file, depth)

    rgbd = RGBDImageUtil.load_rgbd_image(colour_file, depth_file)
    assert rgbd.are_aligned()
    assert np.array_equal(rgbd.color.as_array(), colour)
    assert rgbd.depth.get_dtype() == np.float32
    assert np.allclose(rgbd.depth.as_array(), 1.5)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(RuntimeError):
        RGBDImageUtil.load_rgbd_image(str(tmp_path / "nope.png"), str(tmp_path / "nope_depth.png"))


def test_side_by_side_matches_max_bound():
    colour = Image(np.full((240, 320, 3), 50, dtype=np.uint8))
    depth = Image(np.linspace(0.0, 2.0, 120 * 160, dtype=np.float32).reshape(120, 160))
    rgbd = RGBDImage(colour, depth)

    canvas = RGBDImageUtil.make_side_by_side_image(rgbd)
    width, height = rgbd.get_max_bound()
    assert canvas.shape == (height, width, 3)
    assert canvas.dtype == np.uint8
    assert np.all(canvas[:, :320] == 50)
    assert canvas[119, 479, 0] == 255
    assert np.all(canvas[120:, 320:] == 0)


def test_side_by_side_of_empty_image():
    canvas = RGBDImageUtil.make_side_by_side_image(RGBDImage())
    assert canvas.shape == (0, 0, 3)
