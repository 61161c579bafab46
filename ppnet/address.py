"""IPv4 endpoint addresses."""

from __future__ import annotations

import socket
from dataclasses import dataclass


@dataclass(frozen=True)
class IPv4Address:
    """An IPv4 host and port pair."""

    host: str
    port: int

    @staticmethod
    def pton(text: str) -> int:
        """Parse dotted-quad ``text`` into its 32-bit numeric address."""
        try:
            packed = socket.inet_pton(socket.AF_INET, text)
        except (OSError, ValueError) as err:
            raise ValueError("Failed to parse address string") from err
        return int.from_bytes(packed, "big")

    @classmethod
    def from_presentation(cls, text: str, port: int) -> IPv4Address:
        """Build an address from dotted-quad text and a port number."""
        numeric = cls.pton(text)
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"Port {port} is out of range [0..65535]")
        host = socket.inet_ntoa(numeric.to_bytes(4, "big"))
        return cls(host, port)

    @classmethod
    def from_sockaddr(cls, sockaddr: tuple) -> IPv4Address:
        """Build an address from a ``(host, port)`` socket address tuple."""
        host, port = sockaddr[:2]
        return cls(host, port)

    def as_sockaddr(self) -> tuple[str, int]:
        """Return the ``(host, port)`` tuple used by socket calls."""
        return (self.host, self.port)