"""UDP number client and server with small IPv4 socket helpers."""

__version__ = "0.1.0"
__all__ = ["address", "arguments", "client", "errors", "nethelpers", "server", "sockets"]