# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Linear mapping of color components between the byte range [0, 255] and the
unit interval [0.0, 1.0].
"""

from __future__ import annotations

import math

from .types.constants import MAX_COLOR_VALUE

# Products are rounded to this many decimals before truncation so that
# binary floating point noise (e.g. 48.99999999999999) does not lose a step.
_DENORMALIZE_PRECISION = 9


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def map_range(value: float, src_lo: float, src_hi: float, dst_lo: float, dst_hi: float) -> float:
    """Map ``value`` from [src_lo, src_hi] onto [dst_lo, dst_hi]. Input is clamped first."""
    value = clamp(value, src_lo, src_hi)
    return dst_lo + (value - src_lo) * (dst_hi - dst_lo) / (src_hi - src_lo)


def normalize(value: int) -> float:
    """Byte value [0, 255] -> unit interval."""
    return map_range(value, 0, MAX_COLOR_VALUE, 0.0, 1.0)


def denormalize(value: float) -> int:
    """
    Unit interval -> byte value, truncated toward negative infinity.

    The result is not clamped; callers range-check it. NaN and infinities
    raise ValueError / OverflowError from ``math.floor``.
    """
    return math.floor(round(value * MAX_COLOR_VALUE, _DENORMALIZE_PRECISION))
