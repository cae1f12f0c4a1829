# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Raster interop: Pixmap <-> numpy arrays and Pillow images.

Arrays are (height, width, 3) uint8 in row-major order, top row first, the
same layout Pillow uses for RGB images. Components go through the codec's
own normalize/denormalize, so a pixmap converted to an array holds the same
byte values the encoder would write.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from . import types as ppm
from .color_range import normalize
from .error import OutOfRangeComponent
from .semantics import denormalize_component


def to_array(pixmap: ppm.Pixmap) -> np.ndarray:
    """
    Convert a pixmap to a (height, width, 3) uint8 array.

    Raises:
        EncodingOverflow: If a component is outside the unit interval.
    """
    array = np.empty((pixmap.height, pixmap.width, ppm.NUM_COLOR_COMPONENTS), dtype=np.uint8)
    for y, row in enumerate(pixmap):
        for x, color in enumerate(row):
            array[y, x] = [denormalize_component(c) for c in color]
    return array


def from_array(array) -> ppm.Pixmap:
    """
    Convert a (height, width, 3) array of integers in [0, 255] to a pixmap.

    Raises:
        ValueError: Wrong shape or non-integer dtype.
        OutOfRangeComponent: A value is outside [0, 255].
    """
    array = np.asarray(array)
    if array.ndim != 3 or array.shape[2] != ppm.NUM_COLOR_COMPONENTS:
        raise ValueError(f"expected a (height, width, 3) array, got shape {array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"expected an integer array, got dtype {array.dtype}")
    if array.size and (array.min() < 0 or array.max() > ppm.MAX_COLOR_VALUE):
        raise OutOfRangeComponent(
            f"array values must be within [0, {ppm.MAX_COLOR_VALUE}], "
            f"got [{array.min()}, {array.max()}]"
        )

    # Pixmap rejects empty matrices itself
    return ppm.Pixmap(
        [ppm.Color(*(normalize(int(v)) for v in pixel)) for pixel in row]
        for row in array
    )


def to_pil_image(pixmap: ppm.Pixmap) -> Image.Image:
    # (H, W, 3) uint8 is inferred as mode "RGB"
    return Image.fromarray(to_array(pixmap))


def from_pil_image(image: Image.Image) -> ppm.Pixmap:
    """Convert any Pillow image (palette, grayscale, RGBA...) to a pixmap via RGB."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return from_array(np.asarray(image))
