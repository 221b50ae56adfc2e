"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to fd; an integer is written as a single byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected exactly one character, got {len(c)}")
        data = c.encode("utf-8")
    else:
        raise TypeError("expected a character code or a one-character string")
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write s to fd, up to its first NUL character."""
    if not isinstance(s, str):
        raise TypeError("expected a string")
    end = s.find("\0")
    text = s if end < 0 else s[:end]
    _write_all(fd, text.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write s followed by a newline to fd."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of n to fd."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    _write_all(fd, str(n).encode("ascii"))