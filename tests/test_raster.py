# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

np = pytest.importorskip("numpy")
Image = pytest.importorskip("PIL.Image")

from ppmforge.core import types as ppm  # noqa: E402
from ppmforge.core.error import (  # noqa: E402
    EncodingOverflow,
    NonRectangularMatrix,
    OutOfRangeComponent,
)
from ppmforge.core.raster import (  # noqa: E402
    from_array,
    from_pil_image,
    to_array,
    to_pil_image,
)


def test_to_array(sample_pixmap):
    array = to_array(sample_pixmap)
    assert array.shape == (2, 1, 3)
    assert array.dtype == np.uint8
    assert array.tolist() == [[[0, 128, 255]], [[128, 255, 0]]]


def test_to_array_rejects_out_of_range():
    with pytest.raises(EncodingOverflow):
        to_array(ppm.Pixmap([[ppm.Color(0.0, 1.5, 0.0)]]))


def test_from_array(sample_pixmap):
    array = np.array([[[0, 128, 255]], [[128, 255, 0]]], dtype=np.uint8)
    assert from_array(array) == sample_pixmap


def test_array_round_trip(gradient_pixmap):
    assert from_array(to_array(gradient_pixmap)) == gradient_pixmap


@pytest.mark.parametrize("shape", [(2, 2), (2, 2, 4), (3,)])
def test_from_array_rejects_bad_shape(shape):
    with pytest.raises(ValueError):
        from_array(np.zeros(shape, dtype=np.uint8))


def test_from_array_rejects_float_arrays():
    with pytest.raises(ValueError):
        from_array(np.zeros((1, 1, 3), dtype=np.float64))


def test_from_array_rejects_out_of_range():
    with pytest.raises(OutOfRangeComponent):
        from_array(np.array([[[0, 300, 0]]], dtype=np.int32))


def test_from_array_rejects_empty():
    with pytest.raises(NonRectangularMatrix):
        from_array(np.zeros((0, 4, 3), dtype=np.uint8))


def test_pil_round_trip(gradient_pixmap):
    image = to_pil_image(gradient_pixmap)
    assert image.mode == "RGB"
    assert image.size == (6, 3)
    assert from_pil_image(image) == gradient_pixmap


def test_from_pil_converts_mode():
    image = Image.new("L", (2, 1), color=255)
    pixmap = from_pil_image(image)
    assert [list(c) for c in pixmap[0]] == [[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]]


def test_to_array_rejects_nan():
    with pytest.raises(EncodingOverflow):
        to_array(ppm.Pixmap([[ppm.Color(float("nan"), 0.0, 0.0)]]))
