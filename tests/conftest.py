# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from ppmforge.core import types as ppm

# 1 wide, 2 tall
SAMPLE_TEXT = "P3 1 2 255 0 128 255 128 255 0"

SAMPLE_ENCODED = (
    "P3  # Plain portable pixmap\n"
    "1 2 255  # Width, Height, Max color component value\n"
    "\n"
    "  0 128 255\n"
    "\n"
    "128 255   0\n"
    "\n"
)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_encoded():
    return SAMPLE_ENCODED


@pytest.fixture
def sample_pixmap():
    return ppm.Pixmap([
        [ppm.Color(0 / 255, 128 / 255, 255 / 255)],
        [ppm.Color(128 / 255, 255 / 255, 0 / 255)],
    ])


@pytest.fixture
def gradient_pixmap():
    """6x3 pixmap whose components cover distinct byte values."""
    rows = []
    for y in range(3):
        row = []
        for x in range(6):
            row.append(ppm.Color((x * 40) / 255, (y * 100) / 255, (x + y * 6) / 255))
        rows.append(row)
    return ppm.Pixmap(rows)
