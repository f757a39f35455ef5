from __future__ import annotations

import numpy as np
import pytest

from smg.rgbd import Geometry2D, GeometryType, Image


def test_default_image_is_empty():
    image = Image()
    assert image.is_empty()
    assert (image.get_rows(), image.get_cols(), image.get_channels()) == (0, 0, 1)
    assert image.get_dtype() == np.float32
    assert image.get_geometry_type() == GeometryType.IMAGE
    assert image.dimension() == 2
    assert isinstance(image, Geometry2D)


def test_2d_array_becomes_single_channel():
    image = Image(np.zeros((480, 640), dtype=np.uint16))
    assert (image.get_rows(), image.get_cols(), image.get_channels()) == (480, 640, 1)
    assert not image.is_empty()


def test_rejects_bad_shape():
    with pytest.raises(ValueError):
        Image(np.zeros(5, dtype=np.uint8))


def test_image_copies_its_data():
    data = np.ones((2, 3, 3), dtype=np.uint8)
    image = Image(data)
    data[:] = 7
    assert np.all(image.as_array() == 1)

    copy = image.clone()
    copy.as_array()[:] = 9
    assert np.all(image.as_array() == 1)


def test_clear_returns_self_and_empties():
    image = Image(np.ones((4, 5, 3), dtype=np.uint8))
    assert image.clear() is image
    assert image.is_empty()


def test_bounds():
    image = Image(np.zeros((240, 320, 3), dtype=np.uint8))
    assert np.array_equal(image.get_min_bound(), [0, 0])
    assert np.array_equal(image.get_max_bound(), [320, 240])
    assert image.get_max_bound().dtype == np.int64


def test_to_string():
    image = Image(np.zeros((240, 320, 3), dtype=np.uint8))
    assert str(image) == "Image[size=(320,240), channels=3, format=uint8]"


def test_legacy_conversion():
    rng = np.random.default_rng(0)
    colour = rng.integers(0, 256, (6, 8, 3), dtype=np.uint8)
    depth = rng.random((6, 8), dtype=np.float32)

    legacy_colour = Image(colour).to_legacy_image()
    legacy_depth = Image(depth).to_legacy_image()
    assert np.array_equal(np.asarray(legacy_colour), colour)
    assert np.array_equal(np.asarray(legacy_depth), depth)

    back = Image.from_legacy_image(legacy_depth)
    assert (back.get_rows(), back.get_cols(), back.get_channels()) == (6, 8, 1)
    assert np.array_equal(back.as_array()[:, :, 0], depth)


def test_empty_legacy_conversion():
    legacy = Image().to_legacy_image()
    assert legacy.is_empty()
    assert Image.from_legacy_image(legacy).is_empty()


def test_legacy_conversion_rejects_unsupported_format():
    with pytest.raises(RuntimeError):
        Image(np.zeros((4, 4), dtype=np.float64)).to_legacy_image()
    with pytest.raises(RuntimeError):
        Image(np.zeros((4, 4, 2), dtype=np.uint8)).to_legacy_image()
