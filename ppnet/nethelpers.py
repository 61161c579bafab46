"""Waiting for sockets to become readable."""

from __future__ import annotations

import select
from collections.abc import Iterable
from typing import TypeVar

from .errors import raise_os_error

_S = TypeVar("_S")


def select_readable(sockets: Iterable[_S]) -> list[_S]:
    """Block until at least one socket is readable and return the readable ones."""
    candidates = list(sockets)
    if not candidates:
        raise ValueError("No sockets to wait on")
    try:
        readable, _, _ = select.select(candidates, [], [])
    except OSError as err:
        raise_os_error("Failed to call 'select'", err)
    return [sock for sock in candidates if sock in readable]