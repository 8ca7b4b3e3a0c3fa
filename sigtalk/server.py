"""Signal-driven receiver that prints each message it is sent."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from sigtalk.chars import itoa
from sigtalk.protocol import BitReceiver, MessageBuffer

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})

Notifier = Callable[[int, int], None]


def _send_ack(pid: int, signum: int) -> None:
    try:
        os.kill(pid, signum)
    except OSError:
        pass


class Server:
    """Decodes bits carried by SIGUSR1/SIGUSR2 and acknowledges each one."""

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self._output = output
        self._notify = notify if notify is not None else _send_ack
        self._bits = BitReceiver()
        self._buffer = MessageBuffer()
        self.client_pid: Optional[int] = None

    def _emit(self, message: bytes) -> None:
        out = self._output if self._output is not None else sys.stdout.buffer
        out.write(message + b"\n")
        out.flush()

    def handle(self, signum: int, sender_pid: int) -> Optional[bytes]:
        """Process one signal from sender_pid; return a message when one completes."""
        if signum not in _SIGNALS:
            raise ValueError(f"unexpected signal: {signum}")
        if sender_pid:
            self.client_pid = sender_pid
        message = None
        byte = self._bits.feed(signum == signal.SIGUSR1)
        if byte is not None:
            message = self._buffer.push(byte)
            if message is not None:
                self._emit(message)
        if self.client_pid is not None:
            self._notify(self.client_pid, signal.SIGUSR1)
        return message

    def serve_forever(self) -> None:
        """Wait for signals and handle them until interrupted."""
        if not hasattr(signal, "sigwaitinfo"):
            raise OSError("waiting for signal information is not supported here")
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Print the server PID, then receive messages until interrupted."""
    print("Server PID : " + itoa(os.getpid()), flush=True)
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError:
        print("Error : Sigaction", flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())