# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Pixmap Module

The decoded image: an ordered sequence of rows, each an ordered sequence of
Colors. Width and height are not stored; they are derived from the row count
and the length of the first row. Row-length uniformity is checked when the
pixmap is built, so every Pixmap instance is rectangular.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from ..error import NonRectangularMatrix
from .color import Color


class Pixmap:
    """Rectangular matrix of Colors, addressed as ``pixmap[row][column]``."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[Color]]) -> None:
        matrix = [list(row) for row in rows]

        if not matrix or not matrix[0]:
            raise NonRectangularMatrix("pixel matrix must have at least one row and one column")

        width = len(matrix[0])
        for row_index, row in enumerate(matrix, start=1):
            if len(row) != width:
                raise NonRectangularMatrix(
                    f"row {row_index} has {len(row)} pixels, expected {width}"
                )
            for color in row:
                if not isinstance(color, Color):
                    raise TypeError(
                        f"pixel in row {row_index} is {type(color).__name__}, expected Color"
                    )

        self.rows = matrix

    @classmethod
    def filled(cls, width: int, height: int, color: Color | None = None) -> Pixmap:
        """Create a ``width`` x ``height`` pixmap with every pixel set to ``color``."""
        color = color or Color()
        return cls([[color.copy() for _ in range(width)] for _ in range(height)])

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[list[Color]]:
        return iter(self.rows)

    def __getitem__(self, row: int) -> Sequence[Color]:
        return self.rows[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pixmap):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"<Pixmap {self.width}x{self.height}>"
