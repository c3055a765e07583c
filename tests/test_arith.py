import pytest

from syslab.arith import (
    arith,
    call_proc,
    caller,
    mult2,
    remdiv,
    scale,
    store_uprod,
    swap_add,
)


@pytest.mark.parametrize("x", [0, 1, -1, 0x12345678, 2**40])
def test_arith_equal_operands_cancel_mask(x):
    assert arith(x, x, 1) == 48
    assert arith(x, x, 0) == 0


@pytest.mark.parametrize("x,y", [(0xFF, 0), (0x0F0F0F0F, 0), (-1, 0), (5, 9)])
def test_arith_mask_only_low_nibbles(x, y):
    result = -arith(x, y, 0)
    assert result & ~0x0F0F0F0F == 0
    assert result == (x ^ y) & 0x0F0F0F0F


def test_scale_coefficients():
    assert scale(1, 0, 0) == 1
    assert scale(0, 1, 0) == 4
    assert scale(0, 0, 1) == 12


@pytest.mark.parametrize("x,y,z", [(1, 2, 3), (-7, 5, 0), (100, -30, 9)])
def test_scale_is_linear(x, y, z):
    assert scale(x, y, z) == scale(x, 0, 0) + scale(0, y, 0) + scale(0, 0, z)


def test_store_uprod_keeps_full_product():
    big = 2**64 - 1
    assert store_uprod(big, big) == big * big
    assert store_uprod(big, big) >= 2**64


def test_store_uprod_treats_operands_as_unsigned():
    assert store_uprod(-1, 1) == 2**64 - 1


@pytest.mark.parametrize("x,y", [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (100, 7)])
def test_remdiv_invariants(x, y):
    q, r = remdiv(x, y)
    assert q * y + r == x
    assert abs(r) < abs(y)
    assert r == 0 or (r < 0) == (x < 0)


def test_remdiv_truncates_toward_zero():
    assert remdiv(-7, 2) == (-3, -1)


def test_remdiv_by_zero():
    with pytest.raises(ZeroDivisionError):
        remdiv(1, 0)


def test_mult2():
    assert mult2(2, 3) == 6
    assert mult2(-4, 9) == mult2(9, -4)


def test_mult2_wraps():
    assert mult2(2**62, 4) == 0


def test_swap_add_swaps_and_sums():
    a, b, total = swap_add(534, 1057)
    assert (a, b) == (1057, 534)
    assert total == a + b


def test_caller():
    assert caller() == 832093


def test_call_proc():
    assert call_proc() == -12