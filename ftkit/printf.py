"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x and %X conversions.

Any other character after ``%`` is emitted as it is, so ``%%`` gives a
single percent sign. Integer conversions follow 32-bit C semantics:
``%d`` and ``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and
``%X`` to an unsigned one. ``%p`` treats its argument as a 64-bit address.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional

from ftkit.strings import strdup

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_STDOUT = 1


def _require_int(value: Any, what: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{what} expects an integer, got {type(value).__name__}")
    return int(value)


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def uitoa(n: int) -> str:
    """Return the decimal form of an unsigned 32-bit integer."""
    n = _require_int(n, "uitoa")
    if not 0 <= n <= _UINT_MASK:
        raise ValueError(f"value {n} is outside the unsigned 32-bit range")
    return str(n)


def to_hex(value: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer, without prefix."""
    value = _require_int(value, "to_hex")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return format(value, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` plus lowercase hex; a null address is ``(nil)``."""
    if address is None:
        return "(nil)"
    address = _require_int(address, "%p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + to_hex(address)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects one character, got {len(value)}")
        return value
    return chr(_require_int(value, "%c") & 0xFF)


def _format_text(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return strdup(value)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_text(value)
    if spec == "p":
        return format_pointer(value)
    if spec in ("d", "i"):
        return str(_signed32(_require_int(value, "%" + spec)))
    if spec == "u":
        return uitoa(_require_int(value, "%u") & _UINT_MASK)
    # remaining specs are x and X
    return to_hex(_require_int(value, "%" + spec) & _UINT_MASK, spec == "X")


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        if spec not in "cspdiuxX":
            yield spec
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield _convert(spec, value)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for fmt and args."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    return "".join(_pieces(strdup(fmt), args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    data = format_string(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        written = os.write(_STDOUT, view)
        view = view[written:]
    return len(data)