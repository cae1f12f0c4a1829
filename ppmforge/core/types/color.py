# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Color Module

A color is a fixed-layout record of three components. Components can be
addressed by position (1, 2, 3) or by name (red, green, blue); both modes read
and write the same fields:

    c = Color(0.0, 0.5, 1.0)
    c[1] == c.red == c["red"] == c.get(1)
    c[3] = 0.25          # same as c.blue = 0.25
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .constants import COMPONENT_NAMES

Index = Union[int, str]


@dataclass
class Color:
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    @staticmethod
    def _field(index: Index) -> str:
        if isinstance(index, str):
            name = index.lower()
            if name not in COMPONENT_NAMES:
                raise KeyError(index)
            return name
        # bool is an int subclass but never a valid position
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"color index must be int or str, not {type(index).__name__}")
        if not 1 <= index <= len(COMPONENT_NAMES):
            raise IndexError(f"color index out of range: {index} (must be 1-3)")
        return COMPONENT_NAMES[index - 1]

    def get(self, index: Index) -> float:
        """Return the component at position 1-3 or with the given name."""
        return getattr(self, self._field(index))

    def put(self, index: Index, value: float) -> None:
        """Store ``value`` at position 1-3 or under the given name."""
        setattr(self, self._field(index), value)

    __getitem__ = get
    __setitem__ = put

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue

    def __len__(self) -> int:
        return len(COMPONENT_NAMES)

    def copy(self) -> Color:
        return Color(self.red, self.green, self.blue)
