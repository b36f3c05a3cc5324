"""Wire protocol: every bit travels as one signal, least significant bit first.

A message is a run of bytes closed by a NUL byte. A ``SIGUSR1`` carries a 0
bit and a ``SIGUSR2`` a 1 bit. The receiver acknowledges each bit with
``SIGUSR1`` and reports a completed message with ``SIGUSR2``.
"""

from __future__ import annotations

import signal

__all__ = [
    "BITS_PER_BYTE",
    "BIT_ZERO_SIGNAL",
    "BIT_ONE_SIGNAL",
    "ACK_SIGNAL",
    "DONE_SIGNAL",
    "MessageAssembler",
    "char_to_bits",
    "encode_message",
    "bit_to_signal",
    "signal_to_bit",
]

BITS_PER_BYTE = 8
BIT_ZERO_SIGNAL = signal.SIGUSR1
BIT_ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
DONE_SIGNAL = signal.SIGUSR2


def char_to_bits(value: int) -> list[int]:
    """Split a byte value into its eight bits, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> shift) & 1 for shift in range(BITS_PER_BYTE)]


def encode_message(message: str | bytes) -> list[int]:
    """Return the bits that carry *message*, NUL terminator included.

    Text is sent as UTF-8. A message may not hold a NUL byte of its own,
    since that byte marks its end.
    """
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in payload:
        raise ValueError("message must not contain a NUL byte")
    return [bit for value in payload + b"\0" for bit in char_to_bits(value)]


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries *bit*."""
    if bit == 0:
        return BIT_ZERO_SIGNAL
    if bit == 1:
        return BIT_ONE_SIGNAL
    raise ValueError(f"not a bit: {bit!r}")


def signal_to_bit(signum: int) -> int:
    """Return the bit that the signal *signum* carries."""
    if signum == BIT_ZERO_SIGNAL:
        return 0
    if signum == BIT_ONE_SIGNAL:
        return 1
    raise ValueError(f"signal {signum} carries no bit")


class MessageAssembler:
    """Rebuild messages from a stream of bits, least significant bit first."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._byte = 0
        self._bits = 0

    def push_bit(self, bit: int) -> bytes | None:
        """Add one bit; return the whole message once its NUL byte is complete."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        self._byte |= bit << self._bits
        self._bits += 1
        if self._bits < BITS_PER_BYTE:
            return None
        value = self._byte
        self._byte = 0
        self._bits = 0
        if value == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(value)
        return None

    def reset(self) -> None:
        """Drop every bit and byte received so far."""
        self._buffer.clear()
        self._byte = 0
        self._bits = 0