"""Parsing of integer command-line arguments."""

from __future__ import annotations

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def parse_int(text: str, error_prefix: str) -> int:
    """Parse the leading integer of ``text``.

    Leading whitespace is skipped and trailing characters after the digits
    are ignored. A missing integer raises ``ValueError`` whose message starts
    with ``error_prefix``; a value outside the 32-bit signed range raises
    ``OverflowError``.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"{error_prefix}: {text!r} is not an integer")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{error_prefix}: {text!r} is out of range")
    return value