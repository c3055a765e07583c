"""Matrix element products and a variable-size frame of references."""

from __future__ import annotations

from collections.abc import Sequence

N = 16

Matrix = Sequence[Sequence[int]]


def _int32(v: int) -> int:
    v &= 0xFFFFFFFF
    return v - (1 << 32) if v >> 31 else v


def _check_square(m: Matrix, n: int, name: str) -> None:
    if len(m) != n or any(len(row) != n for row in m):
        raise ValueError(f"matrix {name} is not {n}x{n}")


def _dot(n: int, a: Matrix, b: Matrix, i: int, k: int) -> int:
    if not (0 <= i < n and 0 <= k < n):
        raise IndexError(f"element ({i}, {k}) outside a {n}x{n} matrix")
    return _int32(sum(x * row[k] for x, row in zip(a[i], b)))


def fix_prod_ele(a: Matrix, b: Matrix, i: int, k: int) -> int:
    """Element (i, k) of the product of two 16x16 int matrices."""
    _check_square(a, N, "a")
    _check_square(b, N, "b")
    return _dot(N, a, b, i, k)


def var_prod_ele(n: int, a: Matrix, b: Matrix, i: int, k: int) -> int:
    """Element (i, k) of the product of two n x n int matrices."""
    _check_square(a, n, "a")
    _check_square(b, n, "b")
    return _dot(n, a, b, i, k)


def vframe(n: int, idx: int, q: int) -> int:
    """Entry ``idx`` of a frame whose slot 0 refers to the loop counter and the rest to ``q``.

    After the loop the counter equals ``n``, so slot 0 reads as ``n``.
    """
    if n < 1:
        raise ValueError("frame size must be at least 1")
    if not 0 <= idx < n:
        raise IndexError(f"index {idx} outside a frame of {n}")
    counter = n
    return counter if idx == 0 else q