"""Deserializer – flat query parameters back to a partial SearchConfig.

Decoding never raises.  A fragment that cannot be understood (``sortBy`` that is
not a JSON array of ``{field, order}``, an unknown operator id, an ``operator``
other than ``and``/``or``) is dropped on its own and logged at debug level.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypedDict

from advanced_search.codec.wire import FIELD_KEY_RE, OPERATOR_KEY, RESERVED_KEYS, SEARCH_KEY, SORT_KEY
from advanced_search.model.conditions import (
    FilterCondition,
    LogicalOperator,
    SortCondition,
    SortOrder,
    create_filter_condition,
    create_sort_condition,
)
from advanced_search.model.values import restore_value
from advanced_search.observability.logging import get_logger
from advanced_search.schema.operators import DEFAULT_CATALOG, OperatorCatalog, OperatorId, ValueShape

__all__ = ["DecodedConfig", "decode", "decode_sort"]

_log = get_logger(__name__)

_SORT_ORDERS = frozenset(o.value for o in SortOrder)
_LOGICAL_OPERATORS = frozenset(o.value for o in LogicalOperator)


class DecodedConfig(TypedDict, total=False):
    """The subset of :class:`SearchConfig` fields recovered from the wire."""
    filter_conditions: tuple[FilterCondition, ...]
    sort_conditions: tuple[SortCondition, ...]
    global_search: str
    default_logical_operator: LogicalOperator


def decode_sort(raw: Any) -> tuple[SortCondition, ...] | None:
    """Parse a ``sortBy`` value; ``None`` when it is not a valid sort array."""
    entries = raw
    if isinstance(raw, (str, bytes)):
        try:
            entries = json.loads(raw)
        except ValueError:
            return None
    if not isinstance(entries, (list, tuple)):
        return None

    sorts: list[SortCondition] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            return None
        field, order = entry.get("field"), entry.get("order")
        if not isinstance(field, str) or not field or not isinstance(order, str) or order not in _SORT_ORDERS:
            return None
        sorts.append(create_sort_condition(field, order))
    return tuple(sorts)


def decode(params: Mapping[str, Any], catalog: OperatorCatalog = DEFAULT_CATALOG) -> DecodedConfig:
    """Decode *params* into the config fields they describe.

    ``filter_conditions`` is always present (possibly empty) so that importing
    replaces the filter list.  Condition ids are freshly generated and values
    come back in the form callers build them with (see
    :func:`~advanced_search.model.values.restore_value`); ``false`` under a
    no-value operator key drops the key.
    """
    decoded = DecodedConfig(filter_conditions=())

    search = params.get(SEARCH_KEY)
    if isinstance(search, str):
        decoded["global_search"] = search
    elif search is not None:
        _log.debug("query_param_dropped", key=SEARCH_KEY, reason="not_a_string")

    if SORT_KEY in params:
        sorts = decode_sort(params[SORT_KEY])
        if sorts is None:
            _log.debug("query_param_dropped", key=SORT_KEY, reason="malformed_sort")
        else:
            decoded["sort_conditions"] = sorts

    operator = params.get(OPERATOR_KEY)
    if isinstance(operator, str) and operator in _LOGICAL_OPERATORS:
        decoded["default_logical_operator"] = LogicalOperator(operator)
    elif operator is not None:
        _log.debug("query_param_dropped", key=OPERATOR_KEY, reason="unknown_logical_operator")

    conditions: list[FilterCondition] = []
    for key, value in params.items():
        if key in RESERVED_KEYS:
            continue
        match = FIELD_KEY_RE.match(key)
        if match is None:
            conditions.append(create_filter_condition(key, OperatorId.EQ.value, value))
            continue
        field, operator_id = match.group(1), match.group(2)
        descriptor = catalog.describe(operator_id)
        if descriptor is None:
            _log.debug("query_param_dropped", key=key, reason="unknown_operator")
            continue
        if descriptor.shape is ValueShape.NONE and value is False:
            _log.debug("query_param_dropped", key=key, reason="no_value_operator_off")
            continue
        conditions.append(create_filter_condition(field, operator_id, restore_value(descriptor, value)))

    decoded["filter_conditions"] = tuple(conditions)
    return decoded
