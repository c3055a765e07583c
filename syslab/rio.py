"""Robust I/O: reads and writes that tolerate short counts, with an optional read buffer."""

from __future__ import annotations

import os

RIO_BUFSIZE = 8192


def rio_readn(fd: int, n: int) -> bytes:
    """Read up to ``n`` bytes from ``fd`` unbuffered, stopping early only at end of file."""
    if n < 0:
        raise ValueError("byte count must not be negative")
    chunks: list[bytes] = []
    nleft = n
    while nleft > 0:
        chunk = os.read(fd, nleft)
        if not chunk:
            break
        chunks.append(chunk)
        nleft -= len(chunk)
    return b"".join(chunks)


def rio_writen(fd: int, data: bytes) -> int:
    """Write all of ``data`` to ``fd``; return the number of bytes written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        if written <= 0:
            raise OSError("write made no progress")
        view = view[written:]
    return len(data)


class Rio:
    """A read buffer attached to a file descriptor."""

    def __init__(self, fd: int, bufsize: int = RIO_BUFSIZE) -> None:
        if bufsize <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.bufsize = bufsize
        self._buf = b""
        self._pos = 0

    @property
    def buffered(self) -> int:
        """Number of unread bytes held in the internal buffer."""
        return len(self._buf) - self._pos

    def _read(self, n: int) -> bytes:
        """Return up to ``n`` bytes, refilling the buffer when it is empty."""
        if self.buffered <= 0:
            chunk = os.read(self.fd, self.bufsize)
            if not chunk:
                return b""
            self._buf = chunk
            self._pos = 0
        take = min(n, self.buffered)
        data = self._buf[self._pos : self._pos + take]
        self._pos += take
        return data

    def readnb(self, n: int) -> bytes:
        """Read up to ``n`` bytes through the buffer, stopping early only at end of file."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        chunks: list[bytes] = []
        nleft = n
        while nleft > 0:
            chunk = self._read(nleft)
            if not chunk:
                break
            chunks.append(chunk)
            nleft -= len(chunk)
        return b"".join(chunks)

    def readlineb(self, maxlen: int) -> bytes:
        """Read a line of at most ``maxlen - 1`` bytes, keeping its newline.

        Returns an empty result at end of file when nothing was read.
        """
        line = bytearray()
        while len(line) < maxlen - 1:
            c = self._read(1)
            if not c:
                break
            line += c
            if c == b"\n":
                break
        return bytes(line)