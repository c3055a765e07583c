"""Implicit free-list allocator with boundary tags, first fit and coalescing."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import NamedTuple

from syslab.memlib import MemLib

WSIZE = 4
DSIZE = 8
CHUNKSIZE = 1 << 12

_WORD = struct.Struct("<I")


class Block(NamedTuple):
    """A heap block: payload offset, total size and allocation state."""

    bp: int
    size: int
    allocated: bool


def _pack(size: int, alloc: bool) -> int:
    return size | int(alloc)


class Allocator:
    """Allocates blocks from a MemLib heap."""

    def __init__(self, mem: MemLib | None = None) -> None:
        self.mem = mem if mem is not None else MemLib()
        start = self.mem.sbrk(4 * WSIZE)
        self._put(start, 0)
        self._put(start + WSIZE, _pack(DSIZE, True))
        self._put(start + 2 * WSIZE, _pack(DSIZE, True))
        self._put(start + 3 * WSIZE, _pack(0, True))
        self._heap_listp = start + 2 * WSIZE
        self._extend_heap(CHUNKSIZE // WSIZE)

    # Word access -----------------------------------------------------------

    def _get(self, p: int) -> int:
        return _WORD.unpack_from(self.mem.heap, p)[0]

    def _put(self, p: int, val: int) -> None:
        _WORD.pack_into(self.mem.heap, p, val)

    def _size_at(self, p: int) -> int:
        return self._get(p) & ~0x7

    def _alloc_at(self, p: int) -> bool:
        return bool(self._get(p) & 0x1)

    @staticmethod
    def _hdrp(bp: int) -> int:
        return bp - WSIZE

    def _ftrp(self, bp: int) -> int:
        return bp + self._size_at(self._hdrp(bp)) - DSIZE

    def _next_blkp(self, bp: int) -> int:
        return bp + self._size_at(bp - WSIZE)

    def _prev_blkp(self, bp: int) -> int:
        return bp - self._size_at(bp - DSIZE)

    # Heap management -------------------------------------------------------

    def _extend_heap(self, words: int) -> int:
        size = (words + 1) * WSIZE if words % 2 else words * WSIZE
        bp = self.mem.sbrk(size)
        self._put(self._hdrp(bp), _pack(size, False))
        self._put(self._ftrp(bp), _pack(size, False))
        self._put(self._hdrp(self._next_blkp(bp)), _pack(0, True))
        return self._coalesce(bp)

    def _coalesce(self, bp: int) -> int:
        prev_alloc = self._alloc_at(self._ftrp(self._prev_blkp(bp)))
        next_alloc = self._alloc_at(self._hdrp(self._next_blkp(bp)))
        size = self._size_at(self._hdrp(bp))

        if prev_alloc and next_alloc:
            return bp
        if prev_alloc:
            size += self._size_at(self._hdrp(self._next_blkp(bp)))
            self._put(self._hdrp(bp), _pack(size, False))
            self._put(self._ftrp(bp), _pack(size, False))
        elif next_alloc:
            size += self._size_at(self._hdrp(self._prev_blkp(bp)))
            self._put(self._ftrp(bp), _pack(size, False))
            self._put(self._hdrp(self._prev_blkp(bp)), _pack(size, False))
            bp = self._prev_blkp(bp)
        else:
            size += self._size_at(self._hdrp(self._prev_blkp(bp))) + self._size_at(
                self._ftrp(self._next_blkp(bp))
            )
            self._put(self._hdrp(self._prev_blkp(bp)), _pack(size, False))
            self._put(self._ftrp(self._next_blkp(bp)), _pack(size, False))
            bp = self._prev_blkp(bp)
        return bp

    def _find_fit(self, asize: int) -> int | None:
        return next(
            (b.bp for b in self.blocks() if not b.allocated and asize <= b.size),
            None,
        )

    def _place(self, bp: int, asize: int) -> None:
        csize = self._size_at(self._hdrp(bp))
        if csize - asize >= 2 * DSIZE:
            self._put(self._hdrp(bp), _pack(asize, True))
            self._put(self._ftrp(bp), _pack(asize, True))
            bp = self._next_blkp(bp)
            self._put(self._hdrp(bp), _pack(csize - asize, False))
            self._put(self._ftrp(bp), _pack(csize - asize, False))
        else:
            self._put(self._hdrp(bp), _pack(csize, True))
            self._put(self._ftrp(bp), _pack(csize, True))

    # Public interface ------------------------------------------------------

    def malloc(self, size: int) -> int | None:
        """Allocate a block of at least ``size`` payload bytes.

        Returns the payload offset, or None when ``size`` is zero.
        Raises MemoryError when the heap cannot grow enough.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            return None
        if size <= DSIZE:
            asize = 2 * DSIZE
        else:
            asize = DSIZE * ((size + DSIZE + (DSIZE - 1)) // DSIZE)

        bp = self._find_fit(asize)
        if bp is None:
            bp = self._extend_heap(max(asize, CHUNKSIZE) // WSIZE)
        self._place(bp, asize)
        return bp

    def free(self, bp: int) -> None:
        """Release the block whose payload starts at ``bp``."""
        if not any(b.bp == bp and b.allocated for b in self.blocks()):
            raise ValueError(f"not an allocated block: {bp}")
        size = self._size_at(self._hdrp(bp))
        self._put(self._hdrp(bp), _pack(size, False))
        self._put(self._ftrp(bp), _pack(size, False))
        self._coalesce(bp)

    def blocks(self) -> Iterator[Block]:
        """The blocks between prologue and epilogue, in address order."""
        bp = self._next_blkp(self._heap_listp)
        while (size := self._size_at(self._hdrp(bp))) > 0:
            yield Block(bp, size, self._alloc_at(self._hdrp(bp)))
            bp = self._next_blkp(bp)