"""Reading a file descriptor one line at a time.

Bytes read past the end of a line are kept per descriptor and served by
the next call for that descriptor.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 1


class LineReader:
    """Line reader that remembers unread data for each descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from fd, newline included, or None at the end.

        The final line is returned without a newline if the data lacks one.
        A read error raises OSError and discards what was held for fd.
        """
        pending = bytearray(self._pending.pop(fd, b""))
        search_from = 0
        while True:
            index = pending.find(b"\n", search_from)
            if index >= 0:
                rest = bytes(pending[index + 1:])
                if rest:
                    self._pending[fd] = rest
                return bytes(pending[: index + 1])
            search_from = len(pending)
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return bytes(pending) if pending else None
            pending += chunk

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of fd until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of fd using a shared reader, or None at the end."""
    return _default_reader.next_line(fd)