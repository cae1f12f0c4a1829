# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Structural encoder: intermediate (textual) form -> plain pixmap text.

Output layout with default options, for a 5x1 image:

    P3  # Plain portable pixmap
    5 1 255  # Width, Height, Max color component value

    255   0   0    0 255   0    0   0 255  255 255 255
      0   0   0

The row wrapping is cosmetic; the decoder ignores it. It is reproduced
exactly so that re-encoded files can be compared byte for byte.
"""

from __future__ import annotations

import logging

from . import types as ppm
from .error import OutputError

logger = logging.getLogger(__name__)


def compile_pixel(pixel_tokens: ppm.PixelTokens, options: ppm.FormatOptions) -> str:
    return options.pixel_fmt % tuple(pixel_tokens)


def compile_row(row: list[ppm.PixelTokens], options: ppm.FormatOptions) -> list[str]:
    """Format one pixel row as lines of at most ``num_columns`` pixels."""
    lines = []
    chunk_size = options.num_columns
    for start in range(0, len(row), chunk_size):
        chunk = row[start:start + chunk_size]
        lines.append(options.columns_delimiter.join(compile_pixel(p, options) for p in chunk))
    return lines


def compile_lines(tokens: ppm.PixmapTokens, options: ppm.FormatOptions) -> list[str]:
    lines = [
        options.label_fmt % ppm.FORMAT_LABEL,
        options.header_fmt % tuple(tokens.header_tokens),
        options.lines_delimiter,
    ]
    for row in tokens.pixel_tokens:
        lines.extend(compile_row(row, options))
        lines.append(options.lines_delimiter)
    return lines


def compile_tokens(tokens: ppm.PixmapTokens, options: ppm.FormatOptions | None = None) -> str:
    """Serialize the intermediate form to text. Every line ends with a newline."""
    options = options or ppm.FormatOptions()
    return "".join(line + ppm.LINE_FEED for line in compile_lines(tokens, options))


class StructuralEncoder:
    """Write the intermediate form of an image to a byte sink."""

    def __init__(self, sink: ppm.Sink, options: ppm.FormatOptions | None = None) -> None:
        self.sink = sink
        self.options = options or ppm.FormatOptions()

    def encode(self, tokens: ppm.PixmapTokens) -> None:
        # compile everything first: a formatting failure must not leave
        # a half-written image in the sink
        text = compile_tokens(tokens, self.options)
        written, is_completed = self.sink.write(text)
        if not is_completed:
            raise OutputError(
                f"short write to {self.sink.name}: {written} of {len(text)} bytes"
            )
        logger.debug("Wrote %d bytes to %s", written, self.sink.name)
