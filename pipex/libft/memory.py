"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(buf: bytes | bytearray, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise IndexError(f"{what} holds {len(buf)} bytes, {n} requested")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise MemoryError("allocation size overflows")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(buf, n)
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    if n < 0:
        raise ValueError("length must not be negative")
    for offset in range(n):
        if offset >= len(a) or offset >= len(b):
            raise IndexError("comparison runs past the end of a buffer")
        if a[offset] != b[offset]:
            return a[offset] - b[offset]
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    _check_length(src, n, "source")
    _check_length(dst, n, "destination")
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dst``, overlap allowed."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(buf, max(dst, src) + n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c``; return ``buf``."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def realloc(buf: bytes | bytearray | None, new_size: int) -> bytearray | None:
    """Return a new buffer of ``new_size`` bytes holding the start of ``buf``.

    A size of zero releases the buffer and returns None.
    """
    if new_size < 0:
        raise ValueError("size must not be negative")
    if new_size == 0:
        return None
    resized = bytearray(new_size)
    if buf:
        keep = min(len(buf), new_size)
        resized[:keep] = buf[:keep]
    return resized