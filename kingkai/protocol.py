"""The bit-by-bit wire protocol between client and server.

Each byte of a message travels most significant bit first, one signal per
bit: SIGUSR1 carries a 1, SIGUSR2 carries a 0. A NUL byte ends the message.
After every bit the server acknowledges with SIGUSR1; after the final NUL
it also sends SIGUSR2 to say the whole message arrived.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

CHAR_BIT = 8
_TOP_BIT = 0x80


class Status(IntEnum):
    """Whether the sender is still waiting for an acknowledgement."""

    BUSY = 0
    READY = 1


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by a terminating NUL byte.

    Text is encoded as UTF-8. As with a C string, anything from the first
    NUL byte onward is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data + b"\0":
        for shift in range(CHAR_BIT - 1, -1, -1):
            yield (byte >> shift) & 1


class Decoder:
    """Reassembles bytes from single bits sent by one client at a time.

    The sender of the first bit of each byte becomes the expected sender;
    bits from anyone else are reported as errors.
    """

    def __init__(self) -> None:
        self.expected = 0
        self._byte = 0
        self._count = 0

    def feed(self, bit: int, sender: int) -> int | None:
        """Take one bit from ``sender``.

        Returns the completed byte once eight bits have arrived (0 marks the
        end of a message), otherwise None. Raises ValueError when the bit
        comes from a process other than the expected sender; the bit is
        still counted, as it is on the wire.
        """
        if self._count == 0 and sender:
            self.expected = sender
        mask = _TOP_BIT >> self._count
        if bit:
            self._byte |= mask
        else:
            self._byte &= ~mask & 0xFF
        self._count += 1
        if sender != self.expected:
            raise ValueError(
                f"Warning: Signal received from unexpected PID: {sender} "
                f"(Expected: {self.expected})"
            )
        if self._count != CHAR_BIT:
            return None
        byte = self._byte
        self._count = 0
        self._byte = 0
        return byte