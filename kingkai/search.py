"""Searching and comparing NUL-terminated text.

Strings are treated the way a C string would be: everything from the
first ``"\\0"`` onward is ignored. Positions are returned as indices,
and None stands for "not found".
"""

from __future__ import annotations

from itertools import zip_longest

NUL = "\0"


def _terminated(s: str) -> str:
    return s.split(NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c``.

    Searching for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c``.

    Searching for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the codes of the first differing characters
    (the end of a string counts as code 0), or 0 if they match.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    pairs = zip_longest(_terminated(a)[:n], _terminated(b)[:n], fillvalue=NUL)
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in ``big``, looking only at the first ``length`` characters.

    The match must lie wholly inside that window. An empty ``little``
    matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index