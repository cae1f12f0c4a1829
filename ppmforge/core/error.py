# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Error Module

Every failure of a decode or encode call is reported by raising one of the
exceptions below. They all derive from ``PpmError`` so callers can catch the
whole family with one handler. No stage returns a partial artifact: when an
exception leaves the pipeline, whatever was built so far is discarded.
"""

from __future__ import annotations


class PpmError(Exception):
    """Base class for all PpmForge codec errors.

    Attributes:
        message: Human readable description.
        line: 1-based input line where decoding stopped, or None.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class MalformedLabel(PpmError):
    """The stream does not start with the exact ``P3`` magic label."""


class MalformedHeader(PpmError):
    """Width/height are not natural numbers or max value is not 255."""


class TruncatedStream(PpmError):
    """Input ended before a token or a full chunk of tokens was read."""


class OutOfRangeComponent(PpmError):
    """A color component is not an integer in [0, 255]."""


class NonRectangularMatrix(PpmError):
    """Pixel rows differ in length (or the matrix is empty)."""


class EncodingOverflow(PpmError):
    """A color component denormalizes outside [0, 255]."""


class ConfigurationError(PpmError):
    """Invalid formatting options."""


class OutputError(PpmError):
    """The byte sink accepted fewer bytes than were written."""
