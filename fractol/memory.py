"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero, in place."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes.

    Only the low eight bits of c are used. Returns None if there is no match.
    """
    _check_count(n, data)
    target = c & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest; return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source were copied
    first. Returns buffer.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    if n and dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low eight bits of c; return buffer."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer