# sigtalk

Receive lines of text from another process that sends them using nothing
but the POSIX signals `SIGUSR1` and `SIGUSR2`.

Each byte of a message arrives as eight signals, most significant bit
first: `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit. After every
bit the server answers the sender with `SIGUSR1`. A zero byte ends the
message, and the server then writes everything it has collected, followed
by a newline.

This works only on POSIX systems, and the server loop needs
`signal.sigwaitinfo`, which is available on Linux.

## Installation

```
pip install .
```

## Running the server

```
$ sigtalk-server
Server PID : 41327
```

The server prints its process id and then waits for signals until it is
interrupted with Ctrl-C. If waiting for signals is not supported on the
platform it prints `Error : Sigaction` and exits with status 1.

## What the package does not do

There is no sending command and no function that sends a message to a
server by signals. `sigtalk.protocol.encode_message` produces the bits a
sender has to deliver, but delivering them, one signal per bit and waiting
for the server's `SIGUSR1` after each, is left to the caller.

## Library use

The encoding and decoding sit in `sigtalk.protocol`, separate from the
signal handling:

```python
from sigtalk.protocol import BitReceiver, MessageBuffer, encode_message

bits = BitReceiver()
buffer = MessageBuffer()
for bit in encode_message("hi"):
    byte = bits.feed(bit)
    if byte is not None:
        message = buffer.push(byte)
        if message is not None:
            print(message)  # b'hi'
```

- `encode_byte(byte)` returns the eight bits of a byte, most significant
  first, as booleans.
- `encode_message(message)` yields the bits of a `str` (as UTF-8) or
  `bytes`, cut at its first zero byte, followed by the terminating zero
  byte.
- `BitReceiver.feed(is_one)` collects bits and returns a byte once eight
  have arrived, otherwise `None`.
- `MessageBuffer.push(byte)` collects bytes and returns the finished
  message when it sees the zero byte, otherwise `None`.

`sigtalk.server.Server` ties these together. `Server.handle(signum,
sender_pid)` processes one `SIGUSR1` or `SIGUSR2`, writes a completed
message and a newline to its output (standard output by default), sends
the acknowledgement to the sender and returns the message when one
completes. The output stream and the acknowledgement function can be
passed to the constructor. `Server.serve_forever()` blocks the two signals
and handles them as they arrive.

`sigtalk.chars` and `sigtalk.strings` hold small helpers for characters and
strings: classification (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
`is_print`), case conversion (`to_lower`, `to_upper`), integer parsing and
formatting (`atoi`, `itoa`), and `split`, `trim`, `substr`,
`find_bounded`, `compare_n`, `find_char`, `rfind_char`, `bounded_copy`,
`bounded_concat`, `join`, `map_indexed` and `each_indexed`.