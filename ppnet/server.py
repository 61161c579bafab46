"""UDP server that prints every byte it receives."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .nethelpers import select_readable
from .sockets import UdpSocket

RECEIVE_BUFFER_SIZE = 0xFFFF


def format_messages(message_id: int, payload: bytes) -> list[str]:
    """One output line per byte of ``payload``."""
    return [f"#{message_id}\t Received {value}" for value in payload]


def serve(
    listen_socket: UdpSocket,
    should_stop: Callable[[], bool] | None = None,
    output: TextIO | None = None,
) -> int:
    """Receive datagrams and print them until ``should_stop`` returns true.

    Returns the number of datagrams handled.
    """
    stop = should_stop or (lambda: False)
    out = output if output is not None else sys.stdout
    message_id = 0
    while True:
        readable = select_readable([listen_socket])
        if stop():
            break
        for sock in readable:
            result = sock.receive_from(RECEIVE_BUFFER_SIZE)
            for line in format_messages(message_id, result.data):
                print(line, file=out, flush=True)
            message_id += 1
    return message_id


def main(argv: Sequence[str] | None = None) -> int:
    try:
        with UdpSocket() as listen_socket:
            listen_socket.bind_any()
            port = listen_socket.sockname().port
            print(f"Started listening on port {port}", flush=True)
            serve(listen_socket)
    except KeyboardInterrupt:
        return 0
    except Exception as err:
        print(f"An error occurred: {err}", file=sys.stderr)
        return 1
    return 0