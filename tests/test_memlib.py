import pytest

from syslab.memlib import MAX_HEAP, MemLib


def test_default_heap_size():
    mem = MemLib()
    assert mem.max_heap == MAX_HEAP
    assert len(mem.heap) == MAX_HEAP
    assert mem.brk == 0


def test_sbrk_returns_old_break():
    mem = MemLib(64)
    assert mem.sbrk(16) == 0
    assert mem.sbrk(8) == 16
    assert mem.brk == 24


def test_sbrk_zero_returns_current_break():
    mem = MemLib(64)
    mem.sbrk(10)
    assert mem.sbrk(0) == 10
    assert mem.brk == 10


def test_sbrk_up_to_limit():
    mem = MemLib(32)
    assert mem.sbrk(32) == 0
    assert mem.brk == mem.max_heap


def test_sbrk_negative_raises():
    mem = MemLib(64)
    with pytest.raises(MemoryError):
        mem.sbrk(-1)
    assert mem.brk == 0


def test_sbrk_past_limit_raises_and_keeps_break():
    mem = MemLib(32)
    mem.sbrk(20)
    with pytest.raises(MemoryError, match="ran out of memory"):
        mem.sbrk(13)
    assert mem.brk == 20


def test_negative_heap_size_rejected():
    with pytest.raises(ValueError):
        MemLib(-1)