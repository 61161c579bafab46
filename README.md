# ppnet

A pair of small command-line programs that talk over UDP. The package also
includes the socket helpers that the programs use.

- **ppnet-server** binds a UDP socket to a port that the operating system
  picks and prints that port. It then prints every byte it receives. Press
  Ctrl+C to stop it.
- **ppnet-client** sends one byte to the server. The byte holds a number from
  0 to 10. The client repeats the send without end and waits that many seconds
  between sends.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

Start the server:

```
ppnet-server
```

It prints a line like `Started listening on port 54321`. Open another terminal
and start one or more clients that point at that port:

```
ppnet-client 127.0.0.1 54321 3
```

The arguments are `<address> <port> <number>`.

- The address must be a dotted IPv4 address.
- The port is read as an integer and kept to 16 bits. Values outside
  0–65535 wrap around.
- The number must be in the range 0 to 10.
- Integer arguments are parsed from their leading digits. Any text after the
  digits is ignored, so `3abc` is read as `3`.

The client prints `Sent 1 bytes` after each send. It stops only when it is
interrupted.

The server prints one line for every byte it receives. Each datagram gets its
own sequence number, starting at 0:

```
#0	 Received 3
```

If the arguments are wrong, or a socket call fails, the program prints
`An error occurred: ...` to standard error and exits with status 1.

## Library

You can also use the modules directly:

- `ppnet.address.IPv4Address` is a frozen `(host, port)` dataclass.
  - `IPv4Address.from_presentation("127.0.0.1", 8080)` parses a dotted address.
  - `IPv4Address.pton(text)` returns the 32-bit numeric form.
  - `as_sockaddr()` and `from_sockaddr()` convert to and from socket address
    tuples.
- `ppnet.arguments.parse_int(text, error_prefix)` parses a leading 32-bit
  signed integer.
  - It raises `ValueError` when there is no integer.
  - It raises `OverflowError` when the value is out of range.
- `ppnet.sockets` wraps IPv4 sockets:
  - `UdpSocket` has `send_to` and `receive_from`. `receive_from` returns a
    `ReceiveResult` with `data`, `sender` and `bytes_received`.
  - `TcpSocket` has `connect`, `listen`, `accept`, `send`, `receive` and
    `set_no_delay`. `accept` returns `None` when a non-blocking socket has no
    connection waiting.
  - Both classes have `bind_any`, `sockname`, `set_non_blocking`, `fileno` and
    `close`, and both work as context managers.
  - `SocketDescriptor` owns the underlying socket. It raises if you close it
    twice.
- `ppnet.nethelpers.select_readable(sockets)` blocks until at least one of
  the given sockets can be read, then returns the readable ones.
- `ppnet.client.ClientArgs.from_shell_args(argv)` validates the client
  arguments. `ppnet.client.run_client(args, should_stop, sleep)` runs the send
  loop and returns the number of messages sent.
- `ppnet.server.serve(listen_socket, should_stop, output)` runs the receive
  loop and returns the number of datagrams handled.
  `ppnet.server.format_messages(message_id, payload)` builds the output lines
  for one datagram.
- Failed socket calls raise `ppnet.errors.SocketError`. The message includes
  the errno value and its description (see `ppnet.errors.errno_message`).

## What it does not do

- Only IPv4 is supported.
- The server does not reply to the client.
- The TCP socket wrapper is a library class only. No command uses it.