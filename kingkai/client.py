"""Sends a message to a server process one bit per signal."""

from __future__ import annotations

import signal
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from types import FrameType
from typing import Optional

from kingkai.ascii import atoi
from kingkai.protocol import Status, encode_bits
from kingkai.signals import SignalError, send_signal, setup_handler

CONFIRMATION = "\n\t✅ Message received ✅"


@contextmanager
def _handler(sig: int, handler: Callable[[int, Optional[FrameType]], None]) -> Iterator[None]:
    previous = setup_handler(sig, handler)
    try:
        yield
    finally:
        signal.signal(sig, previous if previous is not None else signal.SIG_DFL)


class Client:
    """Sends messages to the server whose process id is ``server_pid``.

    Every bit waits for the server's acknowledgement before the next one
    is sent.
    """

    def __init__(
        self,
        server_pid: int,
        send: Callable[[int, int], None] = send_signal,
        poll_interval: float = 42e-6,
    ) -> None:
        self.server_pid = server_pid
        self._send = send
        self._poll_interval = poll_interval
        self._state = Status.BUSY
        self._finished = False

    def _on_ack(self, signum: int, frame: Optional[FrameType]) -> None:
        self._state = Status.READY

    def _on_end(self, signum: int, frame: Optional[FrameType]) -> None:
        self._finished = True
        self._state = Status.READY

    def send_message(self, message: str | bytes) -> bool:
        """Send ``message`` and its terminator.

        Returns True once the server confirms the whole message arrived,
        False if every bit was acknowledged without that confirmation.
        """
        self._finished = False
        with _handler(signal.SIGUSR1, self._on_ack), _handler(signal.SIGUSR2, self._on_end):
            for bit in encode_bits(message):
                if self._finished:
                    break
                self._state = Status.BUSY
                self._send(self.server_pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
                while self._state is Status.BUSY:
                    time.sleep(self._poll_interval)
        return self._finished


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given on the command line to the given server."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write('Usage: client <kingkai> "message"\n')
        return 1
    server_pid, message = atoi(args[0]), args[1]
    try:
        confirmed = Client(server_pid).send_message(message)
    except SignalError as err:
        sys.stderr.write(f"{err}\n")
        return 1
    if confirmed:
        print(CONFIRMATION)
    return 0


if __name__ == "__main__":
    sys.exit(main())