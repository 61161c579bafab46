"""Thin object wrappers around IPv4 TCP and UDP sockets."""

from __future__ import annotations

import errno
import socket
from dataclasses import dataclass

from .address import IPv4Address
from .errors import SocketError, errno_message, raise_os_error

INVALID_SOCKET = -1


class SocketDescriptor:
    """Owns an operating-system socket and closes it once."""

    def __init__(self, sock: socket.socket) -> None:
        self._socket: socket.socket | None = sock

    @classmethod
    def open(cls, kind: int) -> SocketDescriptor:
        """Open a new IPv4 socket of the given type (e.g. ``SOCK_DGRAM``)."""
        try:
            sock = socket.socket(socket.AF_INET, kind)
        except OSError as err:
            raise_os_error("Failed to create socket", err)
        return cls(sock)

    @property
    def raw(self) -> socket.socket:
        """The underlying socket; raises if it has been closed."""
        if self._socket is None:
            raise SocketError(errno_message("Socket is closed", errno.EBADF))
        return self._socket

    @property
    def closed(self) -> bool:
        return self._socket is None

    def fileno(self) -> int:
        """The descriptor number, or ``INVALID_SOCKET`` once closed."""
        if self._socket is None:
            return INVALID_SOCKET
        return self._socket.fileno()

    def close(self) -> None:
        """Close the socket; closing twice raises ``SocketError``."""
        if self._socket is None:
            raise SocketError(errno_message("Failed to close socket", errno.EBADF))
        sock, self._socket = self._socket, None
        try:
            sock.close()
        except OSError as err:
            raise_os_error("Failed to close socket", err)

    def __enter__(self) -> SocketDescriptor:
        return self

    def __exit__(self, *args) -> None:
        if self._socket is not None:
            self.close()


class TransportSocket:
    """Operations shared by TCP and UDP sockets."""

    def __init__(self, descriptor: SocketDescriptor) -> None:
        self._descriptor = descriptor

    @property
    def descriptor(self) -> SocketDescriptor:
        return self._descriptor

    @property
    def closed(self) -> bool:
        return self._descriptor.closed

    def fileno(self) -> int:
        return self._descriptor.fileno()

    def set_non_blocking(self, value: bool) -> None:
        self._descriptor.raw.setblocking(not value)

    def sockname(self) -> IPv4Address:
        """The local address the socket is bound to."""
        try:
            name = self._descriptor.raw.getsockname()
        except OSError as err:
            raise_os_error("Failed to call 'getsockname'", err)
        return IPv4Address.from_sockaddr(name)

    def bind_any(self) -> None:
        """Bind to every local interface on a port the system picks."""
        try:
            self._descriptor.raw.bind(("0.0.0.0", 0))
        except OSError as err:
            raise_os_error("Failed to bind socket", err)

    def close(self) -> None:
        self._descriptor.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        if not self._descriptor.closed:
            self.close()


class TcpSocket(TransportSocket):
    """A stream socket."""

    def __init__(self, descriptor: SocketDescriptor | None = None) -> None:
        super().__init__(descriptor or SocketDescriptor.open(socket.SOCK_STREAM))

    def set_no_delay(self, value: bool) -> None:
        self._descriptor.raw.setsockopt(
            socket.IPPROTO_TCP, socket.TCP_NODELAY, int(bool(value))
        )

    def connect(self, address: IPv4Address) -> None:
        try:
            self._descriptor.raw.connect(address.as_sockaddr())
        except OSError as err:
            raise_os_error("TCP socket failed to connect", err)

    def listen(self, backlog: int) -> None:
        try:
            self._descriptor.raw.listen(backlog)
        except OSError as err:
            raise_os_error("TCP socket failed to listen", err)

    def accept(self) -> TcpSocket | None:
        """Accept a connection, or return ``None`` if a non-blocking call would block."""
        try:
            connection, _ = self._descriptor.raw.accept()
        except BlockingIOError:
            return None
        except OSError as err:
            raise_os_error("Failed to accept socket", err)
        return TcpSocket(SocketDescriptor(connection))

    def send(self, data: bytes) -> int:
        try:
            return self._descriptor.raw.send(data)
        except OSError as err:
            raise_os_error("Socket failed to send data", err)

    def receive(self, size: int) -> bytes:
        try:
            return self._descriptor.raw.recv(size)
        except OSError as err:
            raise_os_error("Socket failed to receive data", err)


@dataclass(frozen=True)
class ReceiveResult:
    """A datagram and the address it came from."""

    data: bytes
    sender: IPv4Address

    @property
    def bytes_received(self) -> int:
        return len(self.data)


class UdpSocket(TransportSocket):
    """A datagram socket."""

    def __init__(self, descriptor: SocketDescriptor | None = None) -> None:
        super().__init__(descriptor or SocketDescriptor.open(socket.SOCK_DGRAM))

    def send_to(self, data: bytes, to: IPv4Address) -> int:
        try:
            return self._descriptor.raw.sendto(bytes(data), to.as_sockaddr())
        except OSError as err:
            raise_os_error("UDP socket failed to send", err)

    def receive_from(self, size: int = 0xFFFF) -> ReceiveResult:
        try:
            data, sender = self._descriptor.raw.recvfrom(size)
        except OSError as err:
            raise_os_error("UDP socket failed to read", err)
        return ReceiveResult(data, IPv4Address.from_sockaddr(sender))