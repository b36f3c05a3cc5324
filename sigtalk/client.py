"""Sending side: transmit a message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterable, Sequence

from sigtalk.numbers import atoi
from sigtalk.protocol import (
    ACK_SIGNAL,
    DONE_SIGNAL,
    bit_to_signal,
    char_to_bits,
    encode_message,
)

__all__ = ["Client", "parse_pid", "main"]

_REPLY_SIGNALS = {ACK_SIGNAL, DONE_SIGNAL}


def parse_pid(text: str) -> int:
    """Read a process id the way the command line gives it; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError("Invalid PID")
    return pid


def _ignore(signum, frame) -> None:
    """Swallow a reply that arrives outside a wait."""


class Client:
    """Send bytes to the server at *pid*, waiting a little for each bit's ack.

    Replies are blocked and collected synchronously, so a slow or missing
    acknowledgement only costs ``ack_attempts * ack_interval`` seconds per bit.
    """

    def __init__(self, pid: int, ack_attempts: int = 50, ack_interval: float = 0.0001) -> None:
        if pid <= 0:
            raise ValueError("Invalid PID")
        if ack_attempts < 0 or ack_interval < 0:
            raise ValueError("ack_attempts and ack_interval must not be negative")
        self.pid = pid
        self.ack_attempts = ack_attempts
        self.ack_interval = ack_interval
        self.delivered = False
        for signum in _REPLY_SIGNALS:
            signal.signal(signum, _ignore)
        signal.pthread_sigmask(signal.SIG_BLOCK, _REPLY_SIGNALS)

    def _wait(self, until_delivered: bool) -> bool:
        """Wait for an ack, or for the delivery report; tell whether it came."""
        for _ in range(self.ack_attempts):
            info = signal.sigtimedwait(_REPLY_SIGNALS, self.ack_interval)
            if info is None:
                continue
            if info.si_signo == DONE_SIGNAL:
                self.delivered = True
                if until_delivered:
                    return True
            elif not until_delivered:
                return True
        return False

    def _send_bits(self, bits: Iterable[int]) -> None:
        for bit in bits:
            os.kill(self.pid, bit_to_signal(bit))
            self._wait(until_delivered=False)

    def send_byte(self, value: int) -> None:
        """Send the eight bits of one byte, least significant first."""
        self._send_bits(char_to_bits(value))

    def send_message(self, message: str | bytes) -> bool:
        """Send *message* and its terminator; tell whether the server confirmed it."""
        bits = encode_message(message)
        self.delivered = False
        self._send_bits(bits)
        if not self.delivered:
            self._wait(until_delivered=True)
        return self.delivered


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given on the command line to the server's process id."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: client <pid> <message>", file=sys.stderr)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        print("Invalid PID", file=sys.stderr)
        return 1
    try:
        delivered = Client(pid).send_message(args[1])
    except OSError:
        print("Message can not be sent.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"sigtalk: {exc}", file=sys.stderr)
        return 1
    if delivered:
        print("sigtalk: message sent with success!")
    return 0


if __name__ == "__main__":
    sys.exit(main())