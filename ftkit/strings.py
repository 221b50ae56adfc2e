"""String inspection, searching and bounded copying.

Strings follow NUL-terminated semantics: anything from the first ``"\\0"``
onwards is ignored, as if the string ended there.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected exactly one character, got {len(c)}")
        return c
    raise TypeError("expected a character code or a one-character string")


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the length of s up to its first NUL character."""
    return len(_cstr(s))


def strdup(s: str) -> str:
    """Return a copy of s up to its first NUL character."""
    return _cstr(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch.

    A string that ends early compares as if followed by NUL (code 0).
    """
    _check_size(n, "n")
    first, second = _cstr(s1)[:n], _cstr(s2)[:n]
    for x, y in zip_longest(first, second, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little wholly inside the first length characters of big.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    _check_size(length, "length")
    haystack = _cstr(big)
    needle = _cstr(little)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size characters, NUL included.

    Returns the text the destination holds and the full length of src,
    so truncation happened whenever that length is at least size.
    """
    _check_size(size)
    text = _cstr(src)
    return text[: max(size - 1, 0)], len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a destination of size characters.

    Returns the resulting text and the length the full concatenation
    would have had; when size does not exceed dest's length, dest is left
    as it is and the length reported is ``strlen(src) + size``.
    """
    _check_size(size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size == 0:
        return head, len(tail)
    if size <= len(head):
        return head, len(tail) + size
    appended, tail_len = strlcpy(tail, size - len(head))
    return head + appended, len(head) + tail_len