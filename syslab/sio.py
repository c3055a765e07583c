"""Output routines that write straight to the standard output descriptor."""

from __future__ import annotations

import os
from typing import NoReturn

STDOUT_FILENO = 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def sio_ltoa(v: int, base: int = 10) -> str:
    """Digits of the non-negative integer ``v`` in ``base`` (2 to 36)."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base out of range: {base}")
    if v < 0:
        raise ValueError("value must not be negative")
    digits = []
    while True:
        v, c = divmod(v, base)
        digits.append(_DIGITS[c])
        if v <= 0:
            break
    return "".join(reversed(digits))


def sio_puts(s: str | bytes) -> int:
    """Write ``s`` to standard output unbuffered; return the bytes written."""
    data = s.encode() if isinstance(s, str) else bytes(s)
    return os.write(STDOUT_FILENO, data)


def sio_putl(v: int) -> int:
    """Write the decimal digits of ``v``; return the bytes written."""
    return sio_puts(sio_ltoa(v, 10))


def sio_error(s: str | bytes) -> NoReturn:
    """Write ``s`` and end the process at once with status 1."""
    sio_puts(s)
    os._exit(1)