"""String helpers with C-library semantics.

Search functions return indices, or None where nothing matches. Comparison
functions return the difference of the first differing character codes.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Turn an int code or a 1-char string into a 1-char string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character finds the terminator, at index len(s).
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s.

    Searching for the NUL character finds the terminator, at index len(s).
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return a + b


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, truncated to at most size - 1 characters, and the
    full length of src, so truncation happened when the length is >= size.
    A size of 0 copies nothing.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When size is not larger than dst, dst is left as it is and the length
    reported is size + len(src).
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of f(index, char) for every character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace every element of chars, in place, by f(index, element)."""
    for i, ch in enumerate(list(chars)):
        chars[i] = f(i, ch)


def _compare(a: str, b: str, limit: Optional[int]) -> int:
    end = max(len(a), len(b))
    if limit is not None:
        end = min(end, limit)
    for i in range(end):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first n characters of a and b.

    The end of a string compares as code 0. Returns the difference of the
    first pair of codes that differ, or 0.
    """
    _check_size("n", n)
    return _compare(a, b, n)


def strcmp(a: str, b: str) -> int:
    """Compare a and b; see strncmp."""
    return _compare(a, b, None)


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly within big[:n].

    An empty little is found at index 0.
    """
    _check_size("n", n)
    if not little:
        return 0
    index = big.find(little, 0, n)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim needs two strings")
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end of s gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def split(s: str, sep: CharLike) -> List[str]:
    """Split s on the character sep, dropping empty words."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]