# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

Writes a decoded pixmap to a PNG file through a Cairo image surface.
"""

import logging

import cairo
import numpy as np

from ...core import types as ppm
from ...core.raster import to_array

logger = logging.getLogger(__name__)


def pixmap_surface(pixmap: ppm.Pixmap) -> cairo.ImageSurface:
    """
    Build a Cairo RGB24 surface holding the pixmap.

    RGB24 pixels are 32-bit native-endian words 0x00RRGGBB, and each row is
    padded to Cairo's stride for the width.
    """
    width, height = pixmap.width, pixmap.height
    rgb = to_array(pixmap).astype(np.uint32)

    stride = cairo.ImageSurface.format_stride_for_width(cairo.FORMAT_RGB24, width)
    words = np.zeros((height, stride // 4), dtype=np.uint32)
    words[:, :width] = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]

    pixel_data = bytearray(words.tobytes())
    return cairo.ImageSurface.create_for_data(
        pixel_data, cairo.FORMAT_RGB24, width, height, stride
    )


def write_png(pixmap: ppm.Pixmap, path: str) -> None:
    """
    Render the pixmap to a PNG file.

    Args:
        pixmap: Decoded image
        path: Output file name
    """
    surface = pixmap_surface(pixmap)
    surface.write_to_png(path)
    logger.info("Wrote %dx%d PNG to %s", pixmap.width, pixmap.height, path)
