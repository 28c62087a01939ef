"""Opaque condition identifiers."""

from __future__ import annotations

import base64
import secrets
import time

_DEFAULT_PREFIX = "condition"


def new_condition_id(prefix: str = _DEFAULT_PREFIX) -> str:
    """Return a fresh ``<prefix>_<millis>_<random>`` identifier.

    The value only gives list items a stable identity; nothing parses it and it
    never crosses the wire.  9 random bytes encode to 12 URL-safe characters.

    Examples::

        new_condition_id()        # 'condition_1718000000000_aB3-xQ7_kR2z'
        new_condition_id("sort")  # 'sort_1718000000000_Zp0qL1mN8wYt'
    """
    raw = secrets.token_bytes(9)
    return f"{prefix}_{time.time_ns() // 1_000_000}_{base64.urlsafe_b64encode(raw).decode()}"


__all__ = ["new_condition_id"]
