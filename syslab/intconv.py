"""Two's-complement conversions, truncation, extension and byte dumps."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Iterator, Sequence


def _mask(bits: int) -> int:
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return (1 << bits) - 1


def to_unsigned(value: int, bits: int) -> int:
    """Reinterpret ``value`` as an unsigned integer of ``bits`` bits."""
    return value & _mask(bits)


def to_signed(value: int, bits: int) -> int:
    """Reinterpret ``value`` as a two's-complement integer of ``bits`` bits."""
    v = value & _mask(bits)
    return v - (1 << bits) if v >> (bits - 1) else v


def int_bytes(value: int, size: int) -> bytes:
    """Little-endian bytes of ``value`` truncated to ``size`` bytes."""
    return (value & _mask(8 * size)).to_bytes(size, "little")


def float_bytes(value: float) -> bytes:
    """Little-endian bytes of ``value`` as a single-precision float."""
    return struct.pack("<f", value)


def show_bytes(data: bytes) -> str:
    """Each byte as two hex digits, each preceded by a space."""
    return "".join(f" {b:02x}" for b in data)


def _casting() -> Iterator[str]:
    v = -12345
    yield f"v = {v}, uv = {to_unsigned(v, 16)}"
    u = 4294967295
    yield f"u = {u}, tu = {to_signed(u, 32)}"
    ty, ux = -1, 1
    conversion = f"tx = {to_signed(ux, 32)}, uy = {to_unsigned(ty, 32)}"
    yield conversion  # explicit cast
    yield conversion  # implicit cast
    sx = to_signed(53191, 16)
    yield f"sx = {sx}, y = {sx}"


def _extend() -> Iterator[str]:
    sx = -12345
    usx = to_unsigned(sx, 16)
    yield f"sx = {sx}: \t{show_bytes(int_bytes(sx, 2))}"
    yield f"usx = {usx}: \t{show_bytes(int_bytes(usx, 2))}"
    yield f"x = {sx}: \t{show_bytes(int_bytes(sx, 4))}"
    yield f"ux = {usx}: \t{show_bytes(int_bytes(usx, 4))}"
    uy = to_unsigned(sx, 32)
    yield f"uy = {uy}:\t{show_bytes(int_bytes(uy, 4))}"


def _printf() -> Iterator[str]:
    x = -1
    yield f"x = {to_unsigned(x, 32)} = {x}"
    u = 2147483648
    yield f"u = {u} = {to_signed(u, 32)}"


def _show_bytes() -> Iterator[str]:
    val = 12345
    yield show_bytes(int_bytes(val, 4))
    yield show_bytes(float_bytes(float(val)))
    yield show_bytes(int_bytes(id(val), struct.calcsize("P")))
    yield show_bytes(int_bytes(val, 2))
    yield show_bytes(int_bytes(to_signed(-val, 16), 2))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the integer representation demonstrations."""
    parser = argparse.ArgumentParser(
        description="Show signed/unsigned conversions and byte representations."
    )
    parser.parse_args(argv)
    for section in (_casting, _extend, _printf, _show_bytes):
        for line in section():
            print(line)
    return 0