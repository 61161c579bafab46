"""UDP client that repeatedly sends a single-byte number to a server."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .address import IPv4Address
from .arguments import parse_int
from .sockets import UdpSocket


@dataclass(frozen=True)
class ClientArgs:
    """Validated client settings."""

    server_address: IPv4Address
    number: int

    def __post_init__(self) -> None:
        if not 0 <= self.number <= 10:
            raise ValueError("The number should be in range [0..10]")

    @classmethod
    def from_shell_args(cls, argv: Sequence[str]) -> ClientArgs:
        """Parse ``<address> <port> <number>`` (without the program name)."""
        if len(argv) != 3:
            raise ValueError("There should be 3 arguments: <address> <port> <number>")
        address_text, port_text, number_text = argv
        # The port is kept to 16 bits, wrapping like an unsigned short.
        port = parse_int(port_text, "Failed to parse port") & 0xFFFF
        server_address = IPv4Address.from_presentation(address_text, port)
        number = parse_int(number_text, "Failed to parse number")
        return cls(server_address, number)


def run_client(
    args: ClientArgs,
    should_stop: Callable[[], bool] | None = None,
    sleep: Callable[[float], object] = time.sleep,
) -> int:
    """Send ``args.number`` as one byte, then pause that many seconds, until stopped.

    Returns the number of messages sent.
    """
    stop = should_stop or (lambda: False)
    sent_messages = 0
    with UdpSocket() as sock:
        while not stop():
            sent = sock.send_to(bytes([args.number]), args.server_address)
            print(f"Sent {sent} bytes", flush=True)
            sent_messages += 1
            sleep(args.number)
    return sent_messages


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        run_client(ClientArgs.from_shell_args(argv))
    except Exception as err:
        print(f"An error occurred: {err}", file=sys.stderr)
        return 1
    return 0