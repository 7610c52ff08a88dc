"""Bit-by-bit messaging between processes over SIGUSR1 and SIGUSR2, with string, memory and formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "ascii",
    "client",
    "linked_list",
    "memory",
    "output",
    "printf",
    "protocol",
    "search",
    "server",
    "signals",
    "strings",
]