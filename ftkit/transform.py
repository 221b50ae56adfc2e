"""Conversions between numbers and text, and building new strings from old ones.

Strings follow NUL-terminated semantics: anything from the first ``"\\0"``
onwards is ignored, as if the string ended there.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from ftkit.strings import strdup

CharLike = Union[int, str]

_WHITESPACE = " \t\v\n\r\f"
_INT_BITS = 32


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _separator(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected exactly one character, got {len(c)}")
        return c
    raise TypeError("expected a character code or a one-character string")


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    rest = strdup(_require_str(text, "text")).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at index start.

    A start beyond the end of s, or a length of zero, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(_require_str(s, "s"))
    if length == 0 or start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return strdup(_require_str(s1, "s1")) + strdup(_require_str(s2, "s2"))


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in charset from both ends of s."""
    text = strdup(_require_str(s, "s"))
    chars = strdup(_require_str(charset, "charset"))
    return text.strip(chars) if chars else text


def split(s: str, sep: CharLike) -> List[str]:
    """Split s on the separator character, dropping empty pieces."""
    text = strdup(_require_str(s, "s"))
    ch = _separator(sep)
    if ch == "\0":
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to each character of s."""
    text = strdup(_require_str(s, "s"))
    return "".join(f(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call f(index, char) for each character of chars, updating it in place.

    The value f returns replaces the character; None leaves it unchanged.
    Iteration stops at the first NUL character.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement