# kingkai

kingkai sends text from one process to another using only two POSIX
signals. Each byte is sent as eight signals, most significant bit first.
`SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. Text is encoded
as UTF-8. After every bit the server replies with `SIGUSR1`. A NUL byte
ends the message, and the server then confirms it with `SIGUSR2`.

kingkai works only on POSIX systems, because it needs `SIGUSR1`, `SIGUSR2`
and `signal.sigwaitinfo`.

## Installation

```
pip install .
```

## Running a server and a client

Start the server. It prints its process id and then waits for messages:

```
$ kingkai-server
Server PID: 4242
```

In another terminal, send a message to that process id:

```
$ kingkai-client 4242 "hello there"
```

The server writes each byte as soon as it arrives. When the terminating NUL
arrives, it writes a newline. After the client receives the confirmation, it
prints a blank line and then:

```
	✅ Message received ✅
```

The server takes no arguments. The client takes exactly two: the server's
process id and the message. The process id is read like C's `atoi`: leading
whitespace and one sign are allowed, and reading stops at the first
non-digit. If the arguments are wrong, either command prints a usage line to
standard error and exits with status 1. The client also exits with status 1
when a signal cannot be sent, for example when no process has that id. Stop
the server with Ctrl-C.

If a bit comes from a process other than the one that started the current
byte, the server writes a line beginning `Warning: Signal received from
unexpected PID` and sends that signal no acknowledgement.

## What it does not do

- The client waits for each acknowledgement with no timeout and no retry. It
  waits forever if the server dies or never replies.
- The server decodes one message at a time. Messages from several clients at
  once are not kept apart.
- Nothing is encrypted, authenticated or stored. The server only writes the
  received bytes to standard output.
- A message cannot contain a NUL byte. Anything after the first NUL is not
  sent.

## Using it as a library

The wire encoding and the decoder do not depend on signals:

```python
from kingkai.protocol import encode_bits, Decoder

decoder = Decoder()
received = bytearray()
for bit in encode_bits("hi"):          # 8 bits per byte, plus a terminating NUL
    byte = decoder.feed(bit, sender=1234)
    if byte:                            # None until a byte completes; 0 ends the message
        received.append(byte)
# received == bytearray(b"hi")
```

`Decoder.feed` raises `ValueError` when a bit comes from a process other than
the expected sender. `kingkai.protocol.Status` holds the client's `BUSY` and
`READY` states.

Two classes handle the signal side:

- `kingkai.client.Client(server_pid)`: its `send_message(message)` returns
  `True` once the server confirms the message.
- `kingkai.server.Server(out=None)`: `handle(sig, sender_pid)` processes one
  signal, and `serve()` prints the process id and handles signals forever.

Both classes take an optional `send` callable in place of `os.kill`.

`kingkai.signals` has `setup_handler`, `send_signal`, `pending_signals`,
`blocked_signals`, `print_pending_signals` and `print_blocked_signals`. Each
reports failure as `SignalError`, which is a subclass of `OSError`.

### Utility modules

- `kingkai.ascii`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atoi` (wraps like a 32-bit int) and
  `itoa`.
- `kingkai.search`: `strlen`, `strchr`, `strrchr`, `strncmp` and `strnstr`.
  They treat text as ending at the first NUL and return indices, or `None`
  when nothing is found.
- `kingkai.strings`: `strdup`, `strlcpy`, `strlcat`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi` and `striteri`.
- `kingkai.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove`. They work on `bytearray` and `memoryview` objects
  and raise an error on out-of-range counts.
- `kingkai.linked_list`: `LinkedList` of `Node` objects. It has
  `add_front`, `add_back`, `last`, `pop_front`, `clear`, `iterate` and
  `map`, and supports `len()` and iteration.
- `kingkai.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a file descriptor.
- `kingkai.printf`: `format_message` and `printf` for the conversions
  `%c %s %d %i %u %x %X %p %%`, and `format_hex`, `format_pointer`,
  `format_unsigned` and `format_conversion`.

```python
from kingkai.printf import format_message

format_message("%s is %d (0x%x)", "answer", 42, 42)
# 'answer is 42 (0x2a)'
```

## Running the tests

```
pip install ".[test]"
pytest
```