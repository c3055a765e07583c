import pytest

from syslab.arrays import N, fix_prod_ele, var_prod_ele, vframe


def _identity(n):
    return [[1 if r == c else 0 for c in range(n)] for r in range(n)]


def _sample(n):
    return [[r * n + c - 7 for c in range(n)] for r in range(n)]


def test_identity_on_right_returns_element():
    a = _sample(N)
    ident = _identity(N)
    assert all(fix_prod_ele(a, ident, i, k) == a[i][k] for i in range(N) for k in range(N))


def test_identity_on_left_returns_element():
    b = _sample(N)
    ident = _identity(N)
    assert fix_prod_ele(ident, b, 3, 11) == b[3][11]


def test_fixed_and_variable_agree():
    a = _sample(N)
    b = [list(reversed(row)) for row in _sample(N)]
    for i, k in [(0, 0), (5, 9), (15, 15)]:
        assert fix_prod_ele(a, b, i, k) == var_prod_ele(N, a, b, i, k)


def test_variable_size_identity():
    a = _sample(5)
    assert var_prod_ele(5, a, _identity(5), 4, 2) == a[4][2]


def test_result_wraps_to_32_bits():
    big = [[1 << 16] * N for _ in range(N)]
    assert fix_prod_ele(big, big, 0, 0) == 0


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        fix_prod_ele(_sample(4), _sample(4), 0, 0)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        var_prod_ele(3, _sample(3), _sample(3), 3, 0)


def test_vframe_slot_zero_is_counter():
    assert vframe(5, 0, 7) == 5


def test_vframe_other_slots_are_q():
    assert [vframe(4, idx, 9) for idx in range(1, 4)] == [9, 9, 9]


def test_vframe_errors():
    with pytest.raises(IndexError):
        vframe(3, 3, 1)
    with pytest.raises(ValueError):
        vframe(0, 0, 1)