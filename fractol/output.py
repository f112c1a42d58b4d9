"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write a single character to stream (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s to stream; None writes nothing. Returns the characters written."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s followed by a newline; None writes nothing, not even the newline."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal representation of n. Returns the characters written."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return put_str(str(n), stream)