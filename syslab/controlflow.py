"""Conditional branches, loops and switch statements over 64-bit integers."""

from __future__ import annotations

_BITS = 64


def _long(v: int) -> int:
    """Wrap ``v`` to a signed 64-bit integer."""
    v &= (1 << _BITS) - 1
    return v - (1 << _BITS) if v >> (_BITS - 1) else v


class DiffCounter:
    """Absolute difference that counts which branch was taken."""

    def __init__(self) -> None:
        self.lt_cnt = 0
        self.ge_cnt = 0

    def absdiff_se(self, x: int, y: int) -> int:
        """|x - y|, counting calls with x < y and with x >= y."""
        if x < y:
            self.lt_cnt += 1
            return _long(y - x)
        self.ge_cnt += 1
        return _long(x - y)


def absdiff(x: int, y: int) -> int:
    """|x - y| computed with a branch."""
    return _long(y - x) if x < y else _long(x - y)


def cmovdiff(x: int, y: int) -> int:
    """|x - y| computed by evaluating both outcomes and selecting one."""
    rval = _long(y - x)
    eval_ = _long(x - y)
    return eval_ if x >= y else rval


def fact_do(n: int) -> int:
    """Factorial with the body run at least once; returns n itself for n <= 1."""
    result = 1
    while True:
        result = _long(result * n)
        n -= 1
        if n <= 1:
            return result


def fact_while(n: int) -> int:
    """Factorial with the test before the body; 1 for n <= 1."""
    result = 1
    while n > 1:
        result = _long(result * n)
        n -= 1
    return result


def fact_for(n: int) -> int:
    """Factorial by counting up from 2 to n."""
    result = 1
    for i in range(2, n + 1):
        result = _long(result * i)
    return result


def rfact(n: int) -> int:
    """Factorial by recursion."""
    if n <= 1:
        return 1
    return _long(n * rfact(n - 1))


def switch_eg(x: int, n: int) -> int:
    """Value selected by n, with case 102 falling through into 103."""
    match n:
        case 100:
            return _long(x * 13)
        case 102:
            return _long(x + 10 + 11)
        case 103:
            return _long(x + 11)
        case 104 | 106:
            return _long(x * x)
        case _:
            return 0