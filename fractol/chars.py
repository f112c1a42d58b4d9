"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import re
from typing import Union

CharLike = Union[int, str]

_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged.

    The result has the same type as the argument.
    """
    return _shift_case(c, "A", "Z", 32)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged.

    The result has the same type as the argument.
    """
    return _shift_case(c, "a", "z", -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)