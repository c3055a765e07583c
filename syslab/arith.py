"""Arithmetic, multiplication, division and procedure-call examples on fixed-width integers."""

from __future__ import annotations


def _wrap(v: int, bits: int = 64) -> int:
    """Wrap ``v`` to a signed integer of ``bits`` bits."""
    v &= (1 << bits) - 1
    return v - (1 << bits) if v >> (bits - 1) else v


def _u64(v: int) -> int:
    return v & ((1 << 64) - 1)


def arith(x: int, y: int, z: int) -> int:
    """(z * 48) - ((x ^ y) & 0x0F0F0F0F) in 64-bit arithmetic."""
    t1 = x ^ y
    t2 = _wrap(z * 48)
    t3 = t1 & 0x0F0F0F0F
    return _wrap(t2 - t3)


def scale(x: int, y: int, z: int) -> int:
    """x + 4*y + 12*z in 64-bit arithmetic."""
    return _wrap(x + 4 * y + 12 * z)


def store_uprod(x: int, y: int) -> int:
    """Full 128-bit product of two unsigned 64-bit values."""
    return _u64(x) * _u64(y)


def remdiv(x: int, y: int) -> tuple[int, int]:
    """Quotient truncated toward zero and the remainder with the sign of x."""
    if y == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    q = _wrap(q)
    r = _wrap(x - q * y)
    return q, r


def mult2(a: int, b: int) -> int:
    """a * b in 64-bit arithmetic."""
    return _wrap(a * b)


def swap_add(x: int, y: int) -> tuple[int, int, int]:
    """The two values exchanged, followed by their sum."""
    return y, x, _wrap(x + y)


def caller() -> int:
    """Swap and add 534 and 1057, then multiply the sum by the new difference."""
    arg1, arg2, total = swap_add(534, 1057)
    diff = _wrap(arg1 - arg2)
    return _wrap(total * diff)


def _proc(
    a1: int, a1p: int, a2: int, a2p: int, a3: int, a3p: int, a4: int, a4p: int
) -> tuple[int, int, int, int]:
    return (
        _wrap(a1p + a1, 64),
        _wrap(a2p + a2, 32),
        _wrap(a3p + a3, 16),
        _wrap(a4p + a4, 8),
    )


def call_proc() -> int:
    """Add each of a long, int, short and char to itself, then combine them."""
    x1, x2, x3, x4 = 1, 2, 3, 4
    x1, x2, x3, x4 = _proc(x1, x1, x2, x2, x3, x3, x4, x4)
    return _wrap((x1 + x2) * (x3 - x4))