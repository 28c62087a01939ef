"""Engine – SearchEngine Protocol and InMemorySearchEngine.

Evaluates a :class:`SearchConfig` against plain records.  Only enabled filter
conditions take part; they are folded left to right, each condition's
``logical_operator`` joining it to the next one.  String operators compare
case-insensitively and ``between`` includes both bounds.
"""
from __future__ import annotations

import re
import time
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

from advanced_search.engine.result import SearchResult
from advanced_search.model.conditions import FilterCondition, LogicalOperator, SortOrder
from advanced_search.model.config import SearchConfig
from advanced_search.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["InMemorySearchEngine", "SearchEngine", "matches_condition"]

_log = get_logger(__name__)


@runtime_checkable
class SearchEngine(Protocol[T]):
    async def search(self, config: SearchConfig, page: int = 1, page_size: int = 20) -> SearchResult[T]: ...


def _text(value: Any) -> str:
    return str(value).lower()


def _compare(val: Any, target: Any, op: Callable[[Any, Any], bool]) -> bool:
    if val is None or target is None:
        return False
    try:
        return op(val, target)
    except TypeError:
        return False


def matches_condition(record: dict[str, Any], condition: FilterCondition) -> bool:
    """Evaluate a single condition against *record*.

    A value of the wrong shape for its operator never matches.
    """
    val = record.get(condition.field)
    target = condition.value
    match condition.operator:
        case "eq":         return val == target
        case "neq":        return val != target
        case "gt":         return _compare(val, target, lambda a, b: a > b)
        case "gte":        return _compare(val, target, lambda a, b: a >= b)
        case "lt":         return _compare(val, target, lambda a, b: a < b)
        case "lte":        return _compare(val, target, lambda a, b: a <= b)
        case "in":         return isinstance(target, (list, tuple)) and val in target
        case "notIn":      return isinstance(target, (list, tuple)) and val not in target
        case "contains" | "ilike":
            return val is not None and _text(target) in _text(val)
        case "startsWith": return val is not None and _text(val).startswith(_text(target))
        case "endsWith":   return val is not None and _text(val).endswith(_text(target))
        case "regex":
            if val is None:
                return False
            try:
                return re.search(str(target), str(val), re.IGNORECASE) is not None
            except re.error:
                return False
        case "isNull":     return val is None
        case "isNotNull":  return val is not None
        case "between":
            if not isinstance(target, (list, tuple)) or len(target) != 2:
                return False
            low, high = target
            return _compare(val, low, lambda a, b: a >= b) and _compare(val, high, lambda a, b: a <= b)
        case _:
            return False


def _matches_all(record: dict[str, Any], config: SearchConfig) -> bool:
    result: bool | None = None
    joiner = LogicalOperator.AND
    for condition in config.enabled_conditions():
        hit = matches_condition(record, condition)
        if result is None:
            result = hit
        elif joiner is LogicalOperator.OR:
            result = result or hit
        else:
            result = result and hit
        joiner = condition.logical_operator
    return True if result is None else result


def _sort_key(value: Any) -> tuple[str, Any]:
    """Numbers sort together ahead of other types; other values group by type name."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return ("", value)
    return (type(value).__name__, value)


class InMemorySearchEngine(Generic[T]):
    """Search engine that evaluates a SearchConfig over a list of dict-like objects."""

    def __init__(self, items: list[T], key_fn: Callable[[T], dict[str, Any]] | None = None) -> None:
        self._items = items
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or (lambda x: x if isinstance(x, dict) else x.__dict__)

    async def search(self, config: SearchConfig, page: int = 1, page_size: int = 20) -> SearchResult[T]:
        t0 = time.monotonic()
        terms = config.global_search.strip().lower()
        results = []
        for item in self._items:
            d = self._key_fn(item)
            if terms and not any(terms in _text(v) for v in d.values() if v is not None):
                continue
            if not _matches_all(d, config):
                continue
            results.append(item)

        # lowest priority first so that the primary key wins (stable sort)
        for sort in reversed(config.sort_conditions):
            present = [x for x in results if self._key_fn(x).get(sort.field) is not None]
            missing = [x for x in results if self._key_fn(x).get(sort.field) is None]
            reverse = sort.order is SortOrder.DESC
            try:
                present.sort(key=lambda x: _sort_key(self._key_fn(x)[sort.field]), reverse=reverse)
            except TypeError:
                # same type name, still unorderable (dicts, mixed containers)
                present.sort(key=lambda x: repr(_sort_key(self._key_fn(x)[sort.field])), reverse=reverse)
            results = present + missing

        total = len(results)
        start = max(page - 1, 0) * page_size
        page_items = results[start: start + page_size]
        took_ms = int((time.monotonic() - t0) * 1000)
        _log.debug("search_executed", total=total, page=page, took_ms=took_ms)
        return SearchResult(
            items=page_items,
            total=total,
            page=page,
            page_size=page_size,
            config=config,
            applied_condition_ids=tuple(c.id for c in config.enabled_conditions()),
            took_ms=took_ms,
        )
