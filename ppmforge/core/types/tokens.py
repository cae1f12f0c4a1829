# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Tokens Module

Intermediate (textual) form of an image and the structures around it.

The intermediate form mirrors the on-disk layout but keeps every value as the
string token it was read as (or will be written as). Example for a 1x2 image:

    P3 1 2 255 0 128 255 128 255 0

    PixmapTokens(
        header_tokens=("1", "2", "255"),
        pixel_tokens=[
            [("0", "128", "255")],
            [("128", "255", "0")],
        ],
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from ..error import ConfigurationError
from .constants import COMMENT, SPACE, TAB

PixelTokens = tuple[str, str, str]

_BLANKS = SPACE + TAB
_TEXT_FIELDS = (
    "columns_delimiter",
    "lines_delimiter",
    "label_fmt",
    "header_fmt",
    "pixel_fmt",
    "dimension_fmt",
    "component_fmt",
)


class Header(NamedTuple):
    width: int
    height: int


@dataclass
class PixmapTokens:
    header_tokens: tuple[str, str, str]
    pixel_tokens: list[list[PixelTokens]]


@dataclass
class FormatOptions:
    """Output formatting for the encoder.

    Defaults reproduce the canonical layout:

        P3  # Plain portable pixmap
        1 2 255  # Width, Height, Max color component value

          0 128 255

        128 255   0

    """

    # Number of serialized pixels per line of output
    num_columns: int = 4
    # Columns (pixels) separator
    columns_delimiter: str = "  "
    # Line written after the header and after every pixel row
    lines_delimiter: str = ""
    label_fmt: str = "%s  # Plain portable pixmap"
    header_fmt: str = "%s %s %s  # Width, Height, Max color component value"
    pixel_fmt: str = "%3s %3s %3s"
    # Width and height
    dimension_fmt: str = "%d"
    # Color component values and the max color value. Unpadded so the default
    # layout prints "  0 128 255"; "%03d" gives zero-padded components.
    component_fmt: str = "%d"

    def __post_init__(self) -> None:
        if isinstance(self.num_columns, bool) or not isinstance(self.num_columns, int):
            raise ConfigurationError(f"num_columns must be an integer, got {self.num_columns!r}")
        if self.num_columns < 1:
            raise ConfigurationError(f"num_columns must be at least 1, got {self.num_columns}")

        # output is written as ASCII
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string, got {value!r}")
            if not value.isascii():
                raise ConfigurationError(f"{name} must be ASCII, got {value!r}")

        # Separators must read back as plain whitespace or a comment
        if not self.columns_delimiter or self.columns_delimiter.strip(_BLANKS):
            raise ConfigurationError(
                f"columns_delimiter must be one or more spaces or tabs, got {self.columns_delimiter!r}"
            )
        rest = self.lines_delimiter.lstrip(_BLANKS)
        if rest and not rest.startswith(COMMENT):
            raise ConfigurationError(
                f"lines_delimiter must be blank or a {COMMENT!r} comment, got {self.lines_delimiter!r}"
            )
        if "\n" in rest or "\r" in rest:
            raise ConfigurationError("lines_delimiter must not contain line breaks")
