# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Semantic decoding and encoding between the intermediate (textual) form and a
Pixmap of normalized Colors.

    decode_pixels: PixmapTokens -> Pixmap
    encode_pixels: Pixmap -> PixmapTokens

Both are all-or-nothing: the first bad component raises and nothing built so
far is returned.
"""

from __future__ import annotations

import logging

from . import types as ppm
from .color_range import denormalize, normalize
from .error import EncodingOverflow, OutOfRangeComponent
from .parser import parse_integer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def parse_component(token: str) -> int:
    """Parse a color component token to an integer in [0, 255]."""
    value = parse_integer(token)
    if value is None:
        raise OutOfRangeComponent(f"color component {token!r} is not an integer")
    if not 0 <= value <= ppm.MAX_COLOR_VALUE:
        raise OutOfRangeComponent(
            f"color component {value} is outside [0, {ppm.MAX_COLOR_VALUE}]"
        )
    return value


def parse_pixel(pixel_tokens: ppm.PixelTokens) -> ppm.Color:
    """("0", "128", "255") -> Color(0.0, 0.50196..., 1.0)"""
    red, green, blue = (parse_component(token) for token in pixel_tokens)
    return ppm.Color(normalize(red), normalize(green), normalize(blue))


def decode_pixels(tokens: ppm.PixmapTokens) -> ppm.Pixmap:
    rows = []
    for row_index, row in enumerate(tokens.pixel_tokens, start=1):
        parsed_row = []
        for column_index, pixel_tokens in enumerate(row, start=1):
            try:
                parsed_row.append(parse_pixel(pixel_tokens))
            except OutOfRangeComponent as e:
                raise OutOfRangeComponent(
                    f"{e.message} at row {row_index}, column {column_index}"
                ) from None
        rows.append(parsed_row)

    pixmap = ppm.Pixmap(rows)
    logger.debug("Decoded %dx%d pixmap", pixmap.width, pixmap.height)
    return pixmap


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def denormalize_component(value: float) -> int:
    """Map a unit-interval component to its byte value, e.g. 0.5 -> 127."""
    try:
        byte_value = denormalize(value)
    except (ValueError, OverflowError, TypeError):
        raise EncodingOverflow(f"color component {value!r} cannot be denormalized") from None

    if not 0 <= byte_value <= ppm.MAX_COLOR_VALUE:
        raise EncodingOverflow(
            f"color component {value!r} maps to {byte_value}, outside [0, {ppm.MAX_COLOR_VALUE}]"
        )
    return byte_value


def compile_component(value: float, options: ppm.FormatOptions) -> str:
    return options.component_fmt % denormalize_component(value)


def compile_color(color: ppm.Color, options: ppm.FormatOptions) -> ppm.PixelTokens:
    return (
        compile_component(color.red, options),
        compile_component(color.green, options),
        compile_component(color.blue, options),
    )


def compile_header(pixmap: ppm.Pixmap, options: ppm.FormatOptions) -> tuple[str, str, str]:
    return (
        options.dimension_fmt % pixmap.width,
        options.dimension_fmt % pixmap.height,
        options.component_fmt % ppm.MAX_COLOR_VALUE,
    )


def encode_pixels(pixmap: ppm.Pixmap, options: ppm.FormatOptions | None = None) -> ppm.PixmapTokens:
    options = options or ppm.FormatOptions()

    header_tokens = compile_header(pixmap, options)

    pixel_tokens = []
    for row_index, row in enumerate(pixmap, start=1):
        compiled_row = []
        for column_index, color in enumerate(row, start=1):
            try:
                compiled_row.append(compile_color(color, options))
            except EncodingOverflow as e:
                raise EncodingOverflow(
                    f"{e.message} at row {row_index}, column {column_index}"
                ) from None
        pixel_tokens.append(compiled_row)

    return ppm.PixmapTokens(header_tokens, pixel_tokens)
