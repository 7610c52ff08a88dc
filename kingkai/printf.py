"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Any

from kingkai.ascii import itoa
from kingkai.output import putstr_fd

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > 0x7FFFFFFF else value


def format_hex(num: int, conversion: str = "x") -> str:
    """Format a non-negative number in hexadecimal.

    ``"x"`` gives lower-case digits; any other conversion gives upper case.
    """
    if num < 0:
        raise ValueError(f"hexadecimal value must not be negative, got {num}")
    digits = _HEX_LOWER if conversion == "x" else _HEX_UPPER
    out = []
    while True:
        num, rem = divmod(num, 16)
        out.append(digits[rem])
        if num == 0:
            break
    return "".join(reversed(out))


def format_pointer(ptr: int) -> str:
    """Format an address as ``0x`` plus hex digits, or ``(nil)`` for zero."""
    ptr &= _ULONG_MASK
    if ptr == 0:
        return "(nil)"
    return "0x" + format_hex(ptr, "x")


def format_unsigned(n: int) -> str:
    """Format a value as a 32-bit unsigned decimal number."""
    return str(n & _UINT_MASK)


def _next(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def format_conversion(conversion: str, args: Iterable[Any] | Iterator[Any]) -> str:
    """Format one conversion, taking its argument from ``args`` if it needs one.

    An unknown conversion gives an empty string and takes no argument.
    """
    it = iter(args)
    if conversion == "%":
        return "%"
    if conversion == "c":
        value = _next(it, conversion)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if conversion == "s":
        value = _next(it, conversion)
        return "(null)" if value is None else str(value)
    if conversion in ("d", "i"):
        return itoa(_to_int32(_next(it, conversion)))
    if conversion == "u":
        return format_unsigned(_next(it, conversion))
    if conversion in ("x", "X"):
        return format_hex(_next(it, conversion) & _UINT_MASK, conversion)
    if conversion == "p":
        return format_pointer(_next(it, conversion))
    return ""


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    A ``%`` at the very end of the format is kept as it is.
    """
    remaining = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            conversion = next(chars, None)
            if conversion is None:
                out.append("%")
            else:
                out.append(format_conversion(conversion, remaining))
        else:
            out.append(ch)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the bytes written."""
    text = format_message(fmt, *args)
    putstr_fd(text, 1)
    return len(text.encode("utf-8"))


def _stdout_fd() -> int:
    return os.sys.stdout.fileno() if False else 1  # pragma: no cover