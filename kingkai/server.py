"""Receives messages sent one bit per signal and prints them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO, Optional

from kingkai.protocol import Decoder
from kingkai.signals import send_signal

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Server:
    """Decodes incoming bits, writes the characters and acknowledges each bit."""

    def __init__(
        self,
        out: Optional[BinaryIO] = None,
        send: Callable[[int, int], None] = send_signal,
    ) -> None:
        self.out = out if out is not None else sys.stdout.buffer
        self.decoder = Decoder()
        self._send = send

    def _write(self, data: bytes) -> None:
        self.out.write(data)
        self.out.flush()

    def handle(self, sig: int, sender_pid: int) -> None:
        """Process one signal from ``sender_pid``."""
        if sig == signal.SIGUSR1:
            bit = 1
        elif sig == signal.SIGUSR2:
            bit = 0
        else:
            raise ValueError(f"unexpected signal {sig}")
        try:
            byte = self.decoder.feed(bit, sender_pid)
        except ValueError as warning:
            self._write(f"{warning}\n".encode("utf-8"))
            return
        client = self.decoder.expected
        if byte is not None:
            if byte == 0:
                self._write(b"\n")
                self._send(client, signal.SIGUSR2)
            else:
                self._write(bytes([byte]))
        self._send(client, signal.SIGUSR1)

    def serve(self) -> None:
        """Print this process id, then handle incoming signals forever."""
        self._write(f"Server PID: {os.getpid()}\n".encode("utf-8"))
        old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server; it takes no arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        sys.stderr.write("Usage: server\n")
        return 1
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())