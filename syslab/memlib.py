"""A simulated memory system: one fixed-size heap grown by sbrk."""

from __future__ import annotations

MAX_HEAP = 20 * (1 << 20)


class MemLib:
    """A heap of at most ``max_heap`` bytes with a movable break."""

    def __init__(self, max_heap: int = MAX_HEAP) -> None:
        if max_heap < 0:
            raise ValueError("heap size must not be negative")
        self.max_heap = max_heap
        self.heap = bytearray(max_heap)
        self._brk = 0

    @property
    def brk(self) -> int:
        """Offset of the first byte past the used part of the heap."""
        return self._brk

    def sbrk(self, incr: int) -> int:
        """Grow the heap by ``incr`` bytes and return the old break offset."""
        if incr < 0 or self._brk + incr > self.max_heap:
            raise MemoryError("ERROR: mem_sbrk ran out of memory")
        old_brk = self._brk
        self._brk += incr
        return old_brk