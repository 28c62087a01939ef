"""Serializer – SearchConfig to flat query parameters."""
from __future__ import annotations

import json

from advanced_search.codec.wire import OPERATOR_KEY, SEARCH_KEY, SORT_KEY, QueryParams, field_key
from advanced_search.model.config import SearchConfig
from advanced_search.model.values import shape_value
from advanced_search.observability.logging import get_logger
from advanced_search.schema.operators import DEFAULT_CATALOG, OperatorCatalog

__all__ = ["encode", "encode_sort"]

_log = get_logger(__name__)


def encode_sort(config: SearchConfig) -> str:
    """JSON array of ``{"field", "order"}`` objects, primary key first."""
    return json.dumps([s.to_wire() for s in config.sort_conditions], separators=(",", ":"))


def encode(config: SearchConfig, catalog: OperatorCatalog = DEFAULT_CATALOG) -> QueryParams:
    """Encode *config* into a flat ``QueryParams`` map.

    Each enabled filter condition yields at most one ``field[operator]`` key.
    Disabled conditions, unknown operators and values that do not fit the
    operator's shape are left out.  Two enabled conditions with the same
    ``(field, operator)`` pair share a key; the later one wins and a warning is
    logged.
    """
    params: QueryParams = {}

    if config.global_search:
        params[SEARCH_KEY] = config.global_search

    if config.sort_conditions:
        params[SORT_KEY] = encode_sort(config)

    if config.default_logical_operator is not None:
        params[OPERATOR_KEY] = config.default_logical_operator.value

    emitted: set[str] = set()
    for condition in config.enabled_conditions():
        descriptor = catalog.describe(condition.operator)
        if descriptor is None:
            _log.debug("query_param_skipped", field=condition.field, operator=condition.operator,
                       reason="unknown_operator")
            continue

        shaped = shape_value(descriptor, condition.value)
        if shaped is None:
            _log.debug("query_param_skipped", field=condition.field, operator=condition.operator,
                       reason="value_shape")
            continue

        key = field_key(condition.field, descriptor.id)
        if key in emitted:
            _log.warning("query_param_collision", key=key, condition_id=condition.id)
        emitted.add(key)
        params[key] = shaped.to_wire()

    return params
