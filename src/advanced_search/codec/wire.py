"""Wire vocabulary shared by the encoder and the decoder."""
from __future__ import annotations

import re
from typing import Any

__all__ = [
    "FIELD_KEY_RE",
    "OPERATOR_KEY",
    "QueryParams",
    "RESERVED_KEYS",
    "SEARCH_KEY",
    "SORT_KEY",
    "field_key",
]

SEARCH_KEY = "search"
SORT_KEY = "sortBy"
OPERATOR_KEY = "operator"
RESERVED_KEYS = frozenset({SEARCH_KEY, SORT_KEY, OPERATOR_KEY})

# ``<field>[<operatorId>]``; the field part is greedy so ``a[b][eq]`` reads as
# field ``a[b]`` with operator ``eq``
FIELD_KEY_RE = re.compile(r"^(.+)\[(.+)\]$")

type QueryParams = dict[str, Any]


def field_key(field: str, operator: str) -> str:
    return f"{field}[{operator}]"
