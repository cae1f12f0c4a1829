# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Structural decoder: plain pixmap stream -> intermediate (textual) form.

Decoding is a single sequential pass. Once the label is consumed there is no
backtracking; any failure raises and the partially built token matrix is
dropped with the decoder's stack frame.
"""

from __future__ import annotations

import logging
import re

from . import types as ppm
from .error import MalformedHeader, MalformedLabel, TruncatedStream
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only. int() alone would also accept
# underscores, surrounding whitespace and non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+\Z")

# Significant digits converted exactly. Longer values are far beyond any
# dimension or component and would hit int()'s string conversion limit.
_MAX_DIGITS = 18
_OVERSIZED = 10 ** _MAX_DIGITS


def parse_integer(token: str) -> int | None:
    """
    Parse a decimal integer token. Returns None if it is not one.

    Leading zeros are insignificant, so "0001" is 1 however many zeros it has.
    A value with more than 18 significant digits comes back as +/-10**18, which
    every caller's range check rejects.
    """
    if not _DECIMAL_RE.match(token):
        return None
    sign = -1 if token[0] == "-" else 1
    digits = token.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return sign * _OVERSIZED
    return sign * int(digits or "0")


def interpret_header(header_tokens: list[str] | tuple[str, ...]) -> ppm.Header:
    """
    Convert header tokens to a validated Header.

    Example:

        ("60", "30", "255") -> Header(width=60, height=30)

    Raises:
        MalformedHeader: Width or height is not a natural number, or the max
            color value is anything but 255 (including valid format values
            like 65535).
    """
    if len(header_tokens) != ppm.NUM_HEADER_ITEMS:
        raise MalformedHeader(
            f"header needs {ppm.NUM_HEADER_ITEMS} values, got {len(header_tokens)}"
        )

    width_token, height_token, max_value_token = header_tokens

    width = parse_integer(width_token)
    if width is None or not 1 <= width < _OVERSIZED:
        raise MalformedHeader(f"width must be a positive integer, got {width_token!r}")

    height = parse_integer(height_token)
    if height is None or not 1 <= height < _OVERSIZED:
        raise MalformedHeader(f"height must be a positive integer, got {height_token!r}")

    max_value = parse_integer(max_value_token)
    if max_value != ppm.MAX_COLOR_VALUE:
        raise MalformedHeader(
            f"max color value must be {ppm.MAX_COLOR_VALUE}, got {max_value_token!r}"
        )

    return ppm.Header(width, height)


class StructuralDecoder:
    """
    Read one plain pixmap from a byte source into its intermediate form.

        P3 1 2 255 0 128 255 128 255 0

    is loaded as

        PixmapTokens(
            header_tokens=("1", "2", "255"),
            pixel_tokens=[[("0", "128", "255")], [("128", "255", "0")]],
        )

    Comments are lost. Bytes after the last pixel are not inspected.
    """

    def __init__(self, source: ppm.Source) -> None:
        self.tokenizer = Tokenizer(source)

    def read_label(self) -> str:
        label = self.tokenizer.next_token()
        if label is None:
            raise TruncatedStream("stream holds no format label", line=self.tokenizer.line_num)
        if label != ppm.FORMAT_LABEL:
            raise MalformedLabel(
                f"expected format label {ppm.FORMAT_LABEL!r}, got {label!r}",
                line=self.tokenizer.token_line,
            )
        return label

    def read_header(self) -> tuple[tuple[str, str, str], ppm.Header]:
        header_tokens = tuple(self.tokenizer.next_chunk(ppm.NUM_HEADER_ITEMS))
        try:
            header = interpret_header(header_tokens)
        except MalformedHeader as e:
            raise MalformedHeader(e.message, line=self.tokenizer.token_line) from None
        return header_tokens, header

    def read_pixels(self, header: ppm.Header) -> list[list[ppm.PixelTokens]]:
        """Group pixel tokens into a (height x width x 3) matrix. Values are not parsed."""
        pixel_tokens = []
        for _ in range(header.height):
            row = []
            for _ in range(header.width):
                row.append(tuple(self.tokenizer.next_chunk(ppm.NUM_COLOR_COMPONENTS)))
            pixel_tokens.append(row)
        return pixel_tokens

    def decode(self) -> ppm.PixmapTokens:
        self.read_label()
        header_tokens, header = self.read_header()
        logger.debug("Reading %dx%d pixel tokens", header.width, header.height)
        pixel_tokens = self.read_pixels(header)
        return ppm.PixmapTokens(header_tokens, pixel_tokens)
