"""printf-style formatting and small writers for text streams."""

from __future__ import annotations

import sys
from typing import TextIO

_INT_BITS = 32
_POINTER_MASK = 2**64 - 1
_UINT_MASK = 2**_INT_BITS - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be rendered."""


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"put_char: expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"put_nbr: expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))


def _as_int(value: object, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**_INT_BITS if value >= 2 ** (_INT_BITS - 1) else value


def _render(spec: str, args: list[object]) -> str:
    if spec == "%":
        return "%"
    if spec not in "diucsxXp" or not spec:
        raise FormatError(f"unknown conversion %{spec}" if spec else "format ends with %")
    if not args:
        raise FormatError(f"missing argument for %{spec}")
    value = args.pop(0)
    if spec in "di":
        return str(_to_int32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    if spec == "c":
        if isinstance(value, str) and len(value) == 1:
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return _NULL_STRING
        if not isinstance(value, str):
            raise FormatError(f"%s needs a string, got {type(value).__name__}")
        return value
    if spec == "x":
        return format(_as_int(value, spec) & _UINT_MASK, "x")
    if spec == "X":
        return format(_as_int(value, spec) & _UINT_MASK, "X")
    # %p
    address = 0 if value is None else _as_int(value, spec) & _POINTER_MASK
    if address == 0:
        return _NULL_POINTER
    return "0x" + format(address, "x")


def cformat(fmt: str, *args: object) -> str:
    """Render fmt with the conversions %d %i %u %c %s %x %X %p and %%."""
    if fmt is None:
        raise FormatError("format is None")
    pending = list(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            parts.append(_render(next(chars, ""), pending))
        else:
            parts.append(ch)
    return "".join(parts)


def cprintf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write the rendered format to stream and return the number of characters."""
    text = cformat(fmt, *args)
    _target(stream).write(text)
    return len(text)