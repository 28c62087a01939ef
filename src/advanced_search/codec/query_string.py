"""URL query-string flattening and parsing for ``QueryParams`` maps."""
from __future__ import annotations

import datetime
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl, urlencode

from advanced_search.codec.wire import FIELD_KEY_RE, QueryParams
from advanced_search.model.values import is_sequence
from advanced_search.schema.operators import DEFAULT_CATALOG, OperatorCatalog, ValueShape

__all__ = ["parse_query_string", "stringify", "to_query_string"]


def stringify(value: Any) -> str:
    """Render one wire value the way a browser's ``URLSearchParams`` would."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def to_query_string(params: Mapping[str, Any]) -> str:
    """URL-encode *params*: sequences repeat the key once per element."""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if is_sequence(value):
            pairs.extend((key, stringify(item)) for item in value)
        else:
            pairs.append((key, stringify(value)))
    return urlencode(pairs)


def parse_query_string(query: str, catalog: OperatorCatalog = DEFAULT_CATALOG) -> QueryParams:
    """Parse a URL query string into a ``QueryParams`` map ready for ``decode``.

    Repeated keys become lists.  A lone value under a list- or range-shaped
    operator key is wrapped in a list, and ``true`` under a no-value operator key
    becomes ``True``.
    """
    grouped: dict[str, list[str]] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        grouped.setdefault(key, []).append(value)

    params: QueryParams = {}
    for key, values in grouped.items():
        value: Any = values if len(values) > 1 else values[0]
        match = FIELD_KEY_RE.match(key)
        descriptor = catalog.describe(match.group(2)) if match else None
        if descriptor is not None:
            shape = descriptor.shape
            if shape in (ValueShape.LIST, ValueShape.RANGE) and not isinstance(value, list):
                value = [value]
            elif shape is ValueShape.NONE and value in ("true", "false"):
                value = value == "true"
        params[key] = value
    return params
