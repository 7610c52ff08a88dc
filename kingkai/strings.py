"""Building new strings: copying, bounded copy and append, slicing, joining,
trimming, splitting and per-character mapping.

Input strings are read the way a C string would be: everything from the
first ``"\\0"`` onward is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from kingkai.search import NUL, strlen


def _terminated(s: str) -> str:
    return s[: strlen(s)]


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    return chr(sep & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strdup(s: str) -> str:
    """Return a copy of the string up to its terminator."""
    return _terminated(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters; empty
    when ``size`` is 0) and the full length of ``src``. A returned length
    of ``size`` or more means the copy was truncated.
    """
    _check_size(size, "size")
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer, it comes back unchanged and the
    length reported is ``size`` plus the length of ``src``.
    """
    _check_size(size, "size")
    head = _terminated(dst)
    tail = _terminated(src)
    dst_len = min(len(head), size)
    if size <= dst_len:
        return head, size + len(tail)
    room = size - 1 - dst_len
    return head + tail[:room], dst_len + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start : start + min(length, len(text) - start)]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return _terminated(a) + _terminated(b)


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return _terminated(s).strip(_terminated(charset))


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in _terminated(s).split(_separator(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character of a mutable character sequence.

    Iteration stops at the first NUL. When ``func`` returns a character it
    replaces the one at that index in place; None leaves it as it is.
    """
    for index, ch in enumerate(list(s)):
        if ch == NUL:
            break
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement