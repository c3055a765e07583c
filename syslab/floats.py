"""Floating-point constants, conversions, comparisons and bit reinterpretation."""

from __future__ import annotations

import enum
import math
import struct

from syslab.intconv import to_unsigned


class Range(enum.IntEnum):
    """Where a value lies relative to zero."""

    NEG = 0
    ZERO = 1
    POS = 2
    OTHER = 3


def cel2fahr(temp: float) -> float:
    """Degrees Celsius converted to Fahrenheit."""
    return 1.8 * temp + 32.0


def to_float32(value: float) -> float:
    """``value`` rounded to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _divide(b: float, i: int) -> float:
    if i != 0:
        return b / i
    if b == 0 or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, b)


def funct(a: float, x: float, b: float, i: int) -> float:
    """a * x - b / i with x taken in single precision."""
    return a * to_float32(x) - _divide(b, i)


def find_range(x: float) -> Range:
    """Classify the single-precision value of ``x``."""
    f = to_float32(x)
    if f < 0:
        return Range.NEG
    if f == 0:
        return Range.ZERO
    if f > 0:
        return Range.POS
    return Range.OTHER


def double2bits(d: float) -> int:
    """The 64 bits of the double ``d`` as an unsigned integer."""
    return struct.unpack("<Q", struct.pack("<d", d))[0]


def uu2double(word0: int, word1: int) -> float:
    """The double whose low 32 bits are ``word0`` and high 32 bits ``word1``."""
    data = struct.pack("<II", to_unsigned(word0, 32), to_unsigned(word1, 32))
    return struct.unpack("<d", data)[0]