"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Reads lines from a file descriptor, ``buffer_size`` bytes per read.

    Each line keeps its terminating newline; the last one may lack it.
    Unread data stays buffered between calls.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()

    def _fill(self) -> None:
        searched = 0
        while self._stash.find(b"\n", searched) < 0:
            searched = len(self._stash)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None when no data is left.

        A read error discards the buffered data and propagates.
        """
        try:
            self._fill()
        except OSError:
            self._stash.clear()
            raise
        if not self._stash:
            return None
        end = self._stash.find(b"\n")
        end = len(self._stash) if end < 0 else end + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd``, keeping one buffer per descriptor.

    Returns None at the end of the data, which also drops the buffer.
    """
    if not 0 <= fd < MAX_FD:
        _readers.pop(fd, None)
        raise ValueError(f"file descriptor {fd} out of range")
    reader = _readers.setdefault(fd, LineReader(fd))
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line