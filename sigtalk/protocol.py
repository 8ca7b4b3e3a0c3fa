"""Bit-level wire protocol: bytes travel one bit per signal, most significant bit first.

A one bit is carried by SIGUSR1 and a zero bit by SIGUSR2. A message ends
with a NUL byte, and the receiver acknowledges every bit.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def _check_byte(byte: int) -> int:
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an int byte, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range 0..255: {byte}")
    return byte


def encode_byte(byte: int) -> tuple[bool, ...]:
    """Return the eight bits of byte, most significant first; True means one."""
    byte = _check_byte(byte)
    return tuple(
        bool(byte & (1 << (BITS_PER_BYTE - 1 - bit))) for bit in range(BITS_PER_BYTE)
    )


def encode_message(message: Union[str, bytes]) -> Iterator[bool]:
    """Yield the bits of message followed by the NUL terminator.

    Text is sent as UTF-8. The message ends at its first NUL byte, if any.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data + bytes([TERMINATOR]):
        yield from encode_byte(byte)


class BitReceiver:
    """Collects bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, is_one: bool) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived, else None."""
        if is_one:
            self._value |= 1 << (BITS_PER_BYTE - 1 - self._count)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._count = 0
        self._value = 0
        return byte


class MessageBuffer:
    """Accumulates bytes until the terminator completes a message."""

    def __init__(self) -> None:
        self._data = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes received so far for the message in progress."""
        return bytes(self._data)

    def push(self, byte: int) -> Optional[bytes]:
        """Add a byte; return the finished message on the terminator, else None."""
        byte = _check_byte(byte)
        if byte == TERMINATOR:
            message = bytes(self._data)
            self._data.clear()
            return message
        self._data.append(byte)
        return None