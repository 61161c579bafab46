"""Error types and helpers for turning OS errors into descriptive exceptions."""

from __future__ import annotations

import os
from typing import NoReturn


class SocketError(RuntimeError):
    """Raised when a socket operation fails."""


def errno_message(prefix: str, errno_value: int) -> str:
    """Build a message that carries the errno value and its description."""
    return f"{prefix}; Errno: '{errno_value}' {os.strerror(errno_value)}"


def raise_os_error(
    prefix: str,
    error: OSError,
    exception_type: type[Exception] = SocketError,
) -> NoReturn:
    """Re-raise ``error`` as ``exception_type`` with a prefixed errno message."""
    if error.errno is None:
        message = f"{prefix}; {error}"
    else:
        message = errno_message(prefix, error.errno)
    raise exception_type(message) from error