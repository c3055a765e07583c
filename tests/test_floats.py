import math

import pytest

from syslab.floats import (
    Range,
    cel2fahr,
    double2bits,
    find_range,
    funct,
    to_float32,
    uu2double,
)


def test_cel2fahr_freezing_point():
    assert cel2fahr(0.0) == 32.0


def test_cel2fahr_equal_scales():
    assert cel2fahr(-40.0) == pytest.approx(-40.0)


def test_to_float32_idempotent():
    for v in [0.1, 1e-20, 3.14159, -2.5e10]:
        once = to_float32(v)
        assert to_float32(once) == once


def test_to_float32_loses_precision():
    assert to_float32(0.1) != 0.1
    assert to_float32(0.1) == pytest.approx(0.1, rel=1e-7)


def test_to_float32_overflow_is_infinite():
    assert to_float32(1e300) == math.inf
    assert to_float32(-1e300) == -math.inf


def test_funct_with_zero_b():
    assert funct(2.5, 0.1, 0.0, 3) == 2.5 * to_float32(0.1)


def test_funct_division_by_zero():
    assert funct(1.0, 1.0, 4.0, 0) == -math.inf
    assert math.isnan(funct(1.0, 1.0, 0.0, 0))


@pytest.mark.parametrize(
    "x,expected",
    [(-1.0, Range.NEG), (0.0, Range.ZERO), (-0.0, Range.ZERO), (2.0, Range.POS), (math.nan, Range.OTHER)],
)
def test_find_range(x, expected):
    assert find_range(x) is expected


def test_find_range_tiny_value_rounds_to_zero():
    assert find_range(1e-50) is Range.ZERO


def test_double2bits_one():
    assert double2bits(1.0) == 0x3FF0000000000000


def test_bits_round_trip():
    for d in [1.0, -0.0, 3.5e-300, 123456.789, math.inf]:
        bits = double2bits(d)
        assert uu2double(bits & 0xFFFFFFFF, bits >> 32) == d


def test_uu2double_wraps_negative_words():
    bits = double2bits(-2.0)
    assert uu2double(bits & 0xFFFFFFFF, (bits >> 32) - (1 << 32)) == -2.0