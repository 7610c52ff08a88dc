"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os

from kingkai.ascii import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to a file descriptor.

    An integer is written as a single byte (taken modulo 256); a
    one-character string is written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([c & 0xFF]))


def putstr_fd(s: str | None, fd: int) -> None:
    """Write a string to a file descriptor; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str | None, fd: int) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to a file descriptor."""
    putstr_fd(itoa(n), fd)