# sigtalk

Send a line of text from one process to another using nothing but POSIX
signals. Each byte travels as eight signals, least significant bit first:
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. A message ends with
a zero byte. The server answers every bit with `SIGUSR1`; once the zero byte
arrives it prints the whole message followed by a newline and also sends
`SIGUSR2`, which tells the client the message got through.

Requires Python 3.10 or later on a system where `signal.sigwaitinfo` and
`signal.sigtimedwait` are available, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It takes no arguments and prints its
process id:

```
sigtalk-server
PID: 4242
```

Send it a message from another terminal:

```
sigtalk-client 4242 "hello there"
```

The server prints `hello there`. When the server confirms delivery the client
prints `sigtalk: message sent with success!` and exits with status 0.

The client needs exactly two arguments, a process id and a message; otherwise
it prints `Usage: client <pid> <message>` and exits with status 1. The process
id is read like C's `atoi` (leading whitespace, an optional sign, then digits),
and one that is not positive is rejected with `Invalid PID`. If a signal
cannot be sent, the client reports `Message can not be sent.`. Text is sent as
UTF-8 and may not contain a NUL character.

The server stops on Ctrl-C. Given any argument it prints
`server does not support arguments.` and exits with status 1.

Each bit waits for its acknowledgement for at most 50 tries of 0.1 ms before
the client moves on, so a lost acknowledgement slows a transfer but does not
stop it.

## Library

- `sigtalk.protocol`: `char_to_bits`, `encode_message`, `bit_to_signal`,
  `signal_to_bit`, and `MessageAssembler`, whose `push_bit` returns the
  message as `bytes` once its terminating zero byte is complete, and whose
  `reset` drops a partial message.
- `sigtalk.server`: `Server(output)` writes finished messages to a binary
  stream (standard output by default). `Server.handle_signal(signum,
  sender_pid)` processes one bit signal and acknowledges it;
  `Server.serve_forever()` announces the process id and waits for signals.
  `format_pid(pid)` returns the `PID: ...` line.
- `sigtalk.client`: `Client(pid, ack_attempts=50, ack_interval=0.0001)` with
  `send_byte(value)` and `send_message(message)`, which returns whether the
  server confirmed delivery. `parse_pid(text)` validates a process id.
- `sigtalk.numbers`: C-style integer helpers such as `atoi`, `atol`, `itoa`,
  `ltoa`, `uitoa`, `count_digits`, `count_base`, `check_base`,
  `format_base`, `absolute` and `args_to_ints`.
- `sigtalk.textutil`: C-style character and string helpers such as
  `is_alpha`, `is_digit`, `to_upper`, `find_char`, `rfind_char`, `strncmp`,
  `strnstr`, `strlcat`, `substr`, `strjoin`, `strtrim` and `strmapi`.

## Tests

```
pip install .[test]
pytest
```