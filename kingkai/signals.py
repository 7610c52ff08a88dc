"""Installing signal handlers, sending signals and listing signal sets."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from types import FrameType
from typing import Any, Union

Handler = Union[Callable[[int, Union[FrameType, None]], Any], int, signal.Handlers]


class SignalError(OSError):
    """A signal could not be installed, sent or inspected."""


def setup_handler(sig: int, handler: Handler) -> Handler | None:
    """Install ``handler`` for ``sig`` and return the handler it replaced."""
    try:
        return signal.signal(sig, handler)
    except (OSError, ValueError, RuntimeError) as err:
        raise SignalError(f"Signal handler setup failed: {err}") from err


def send_signal(pid: int, signum: int) -> None:
    """Send ``signum`` to the process ``pid``."""
    try:
        os.kill(pid, signum)
    except (OSError, ValueError, OverflowError) as err:
        raise SignalError(f"Signal transmission failed: {err}") from err


def pending_signals() -> list[signal.Signals]:
    """Signals raised for this thread but not yet delivered, in number order."""
    try:
        return sorted(signal.sigpending())
    except OSError as err:
        raise SignalError(f"sigpending: {err}") from err


def blocked_signals() -> list[signal.Signals]:
    """Signals currently blocked for this thread, in number order."""
    try:
        return sorted(signal.pthread_sigmask(signal.SIG_BLOCK, []))
    except OSError as err:
        raise SignalError(f"sigprocmask: {err}") from err


def _describe(sig: int) -> str:
    return signal.strsignal(sig) or f"Unknown signal {int(sig)}"


def _report(title: str, verb: str, signals: list[signal.Signals], trailer: str) -> None:
    lines = [f"\n=== {title} Signals ==="]
    lines.extend(f"Signal {int(sig)} ({_describe(sig)}) is {verb}" for sig in signals)
    sys.stdout.write("\n".join(lines) + "\n=======================\n" + trailer)


def print_pending_signals() -> None:
    """Print every pending signal to standard output."""
    _report("Pending", "pending", pending_signals(), "\n")


def print_blocked_signals() -> None:
    """Print every blocked signal to standard output."""
    _report("Blocked", "blocked", blocked_signals(), "")