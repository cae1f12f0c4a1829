# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Encode/decode plain portable pixmaps (P3).

    from ppmforge import ppm

    image = ppm.load_file("Data.ppm")
    image[0][0].red = 1.0
    ppm.save_file(image, "Data.Reforged.ppm")

Decoding:  Source -> StructuralDecoder -> PixmapTokens -> decode_pixels -> Pixmap
Encoding:  Pixmap -> encode_pixels -> PixmapTokens -> StructuralEncoder -> Sink

Each call either returns a complete result or raises a PpmError subclass.
"""

from __future__ import annotations

import logging
from typing import Union

from .core import types as ppm
from .core.compiler import StructuralEncoder, compile_tokens
from .core.error import PpmError
from .core.parser import StructuralDecoder
from .core.semantics import decode_pixels, encode_pixels

logger = logging.getLogger(__name__)

# Public names re-exported for callers that only import this module
Color = ppm.Color
Pixmap = ppm.Pixmap
FormatOptions = ppm.FormatOptions


def load(source: ppm.Source) -> ppm.Pixmap:
    """Load one image from a byte source."""
    tokens = StructuralDecoder(source).decode()
    return decode_pixels(tokens)


def loads(data: Union[bytes, bytearray, str]) -> ppm.Pixmap:
    """Load one image from bytes or text."""
    return load(ppm.BytesSource(data))


def load_file(path: str) -> ppm.Pixmap:
    logger.info("Loading image from %s", path)
    with ppm.FileSource.open(path) as source:
        try:
            return load(source)
        except PpmError as e:
            logger.info("Failed to load %s: %s", path, e)
            raise


def save(pixmap: ppm.Pixmap, sink: ppm.Sink, options: ppm.FormatOptions | None = None) -> None:
    """Save an image to a byte sink. Nothing is written if encoding fails."""
    tokens = encode_pixels(pixmap, options)
    StructuralEncoder(sink, options).encode(tokens)


def dumps(pixmap: ppm.Pixmap, options: ppm.FormatOptions | None = None) -> str:
    """Return the image as plain pixmap text."""
    return compile_tokens(encode_pixels(pixmap, options), options)


def save_file(pixmap: ppm.Pixmap, path: str, options: ppm.FormatOptions | None = None) -> None:
    logger.info("Saving image to %s", path)
    # encode before opening: a failed encode must not truncate an existing file
    tokens = encode_pixels(pixmap, options)
    with ppm.FileSink.open(path) as sink:
        StructuralEncoder(sink, options).encode(tokens)
