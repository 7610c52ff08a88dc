"""Byte-buffer primitives: fill, copy, move, search and compare.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers that are only read may be any bytes-like object.
Every count is checked against the buffers it touches, so an out-of-range
request raises instead of running past the end.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(length: int, offset: int, n: int, name: str) -> None:
    if offset < 0 or offset + n > length:
        raise IndexError(
            f"{name}: range [{offset}, {offset + n}) is outside a buffer of {length} bytes"
        )


def memset(buf: bytearray | memoryview, c: int, n: int) -> bytearray | memoryview:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_count(n)
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    _check_count(nmemb)
    _check_count(size)
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within the first ``n``.

    ``c`` is taken modulo 256. Returns None when no such byte is found.
    """
    _check_count(n)
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0
    when the compared ranges are equal.
    """
    _check_count(n)
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(
    dest: bytearray | memoryview, src: bytes | bytearray | memoryview, n: int
) -> bytearray | memoryview:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n)
    _check_span(len(dest), 0, n, "memcpy destination")
    _check_span(len(src), 0, n, "memcpy source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    buf: bytearray | memoryview, dest: int, src: int, n: int
) -> bytearray | memoryview:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The ranges may overlap; the result is as if the source bytes were first
    copied aside. Returns ``buf``.
    """
    _check_count(n)
    _check_span(len(buf), src, n, "memmove source")
    _check_span(len(buf), dest, n, "memmove destination")
    if dest == src or n == 0:
        return buf
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf