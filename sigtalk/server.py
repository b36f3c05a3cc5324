"""Receiving side: rebuild messages from signals and print them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from typing import BinaryIO, NoReturn

from sigtalk.protocol import (
    ACK_SIGNAL,
    BIT_ONE_SIGNAL,
    BIT_ZERO_SIGNAL,
    DONE_SIGNAL,
    MessageAssembler,
    signal_to_bit,
)

__all__ = ["Server", "format_pid", "main"]

_BIT_SIGNALS = {BIT_ZERO_SIGNAL, BIT_ONE_SIGNAL}


def format_pid(pid: int) -> str:
    """Return the line that announces the server's process id."""
    return f"PID: {pid}\n"


class Server:
    """Collect bits sent as signals, print each message, acknowledge each bit."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self._output = output if output is not None else sys.stdout.buffer
        self._assembler = MessageAssembler()
        self.client_pid: int | None = None

    def _write(self, data: bytes) -> None:
        self._output.write(data)
        self._output.flush()

    def handle_signal(self, signum: int, sender_pid: int) -> bytes | None:
        """Take one bit signal from *sender_pid* and reply to the client.

        Returns the message when this bit completes one. A sender id of zero
        or less keeps the client last seen.
        """
        bit = signal_to_bit(signum)
        if sender_pid > 0:
            self.client_pid = sender_pid
        if self.client_pid is None:
            raise RuntimeError("no client known to acknowledge")
        message = self._assembler.push_bit(bit)
        if message is not None:
            self._write(message + b"\n")
            os.kill(self.client_pid, DONE_SIGNAL)
        os.kill(self.client_pid, ACK_SIGNAL)
        return message

    def serve_forever(self) -> NoReturn:
        """Announce the process id, then handle bit signals until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _BIT_SIGNALS)
        try:
            self._write(format_pid(os.getpid()).encode("ascii"))
            while True:
                info = signal.sigwaitinfo(_BIT_SIGNALS)
                self.handle_signal(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server; it takes no arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print("server does not support arguments.", file=sys.stderr)
        return 1
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    except (OSError, RuntimeError) as exc:
        print(f"sigtalk: signal error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())