"""Numeric helpers shared by the Duration type and the codec."""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Integer division truncated toward zero.

    Unlike ``divmod``, the remainder takes the sign of the dividend, so
    ``trunc_divmod(-61, 60) == (-1, -1)``.
    """
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def narrow_f32(value: float) -> float:
    """Round a float to the nearest IEEE-754 binary32 value.

    Magnitudes beyond the binary32 range become infinities, matching a
    native float32 cast.
    """
    if not math.isfinite(value):
        return value
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def fract(value: float) -> float:
    """Fractional part of ``value``, carrying the sign of ``value``."""
    return value - math.trunc(value)
