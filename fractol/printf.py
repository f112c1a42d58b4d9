"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, got {type(value).__name__}")
    return value


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c needs a single character, got {value!r}")
            return value
        return chr(_as_int(value, conversion) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in "di":
        return str(_int32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_as_int(value, conversion) & _UINT32)
    if conversion == "x":
        return format(_as_int(value, conversion) & _UINT32, "x")
    if conversion == "X":
        return format(_as_int(value, conversion) & _UINT32, "X")
    # conversion == "p"
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(_as_int(value, conversion) & _UINT64, "x")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand fmt with args and return the resulting text.

    Unknown conversions produce nothing and take no argument. A lone '%' at
    the end of fmt is an error.
    """
    if fmt is None:
        raise ValueError("format must not be None")
    remaining = iter(args)
    parts = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            parts.append(ch)
            i += 1
            continue
        if i + 1 == len(fmt):
            raise ValueError("format ends with a lone '%'")
        parts.append(_convert(fmt[i + 1], remaining))
        i += 2
    return "".join(parts)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of fmt to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)