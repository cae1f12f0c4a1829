# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

pytest.importorskip("cairo")
Image = pytest.importorskip("PIL.Image")

from ppmforge.devices.png.png import pixmap_surface, write_png  # noqa: E402


def test_surface_size(gradient_pixmap):
    surface = pixmap_surface(gradient_pixmap)
    assert (surface.get_width(), surface.get_height()) == (6, 3)


def test_write_png(tmp_path, gradient_pixmap):
    path = tmp_path / "out.png"
    write_png(gradient_pixmap, str(path))

    with Image.open(path) as image:
        assert image.size == (6, 3)
        rgb = image.convert("RGB")
        # pixel (x=5, y=2): red 200, green 200, blue 17
        assert rgb.getpixel((5, 2)) == (200, 200, 17)
        assert rgb.getpixel((0, 0)) == (0, 0, 0)
