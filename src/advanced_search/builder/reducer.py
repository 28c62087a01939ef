"""Pure state transition ``(SearchConfig, Operation) -> SearchConfig``.

``reduce`` never mutates its input.  An operation that names a
missing id or an out-of-range index returns the configuration unchanged.
"""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from advanced_search.builder.operations import (
    UPDATABLE_CONDITION_FIELDS,
    UPDATABLE_SORT_FIELDS,
    AddCondition,
    AddSort,
    ApplyDecoded,
    ClearConditions,
    ClearSorting,
    DuplicateCondition,
    MoveCondition,
    MoveSort,
    Operation,
    RemoveCondition,
    RemoveSort,
    ReplaceConfig,
    SetDefaultLogicalOperator,
    SetGlobalSearch,
    SetSorting,
    ToggleCondition,
    ToggleSortOrder,
    UpdateCondition,
    UpdateSort,
)
from advanced_search.model.conditions import FilterCondition, SortOrder
from advanced_search.model.config import SearchConfig

__all__ = ["reduce"]

T = TypeVar("T")


def _moved(items: Sequence[T], from_index: int, to_index: int) -> tuple[T, ...] | None:
    n = len(items)
    if not (0 <= from_index < n and 0 <= to_index < n):
        return None
    out = list(items)
    out.insert(to_index, out.pop(from_index))
    return tuple(out)


def _allowed(changes: dict[str, Any], allowed: frozenset[str]) -> dict[str, Any]:
    return {k: v for k, v in changes.items() if k in allowed}


def reduce(config: SearchConfig, operation: Operation) -> SearchConfig:
    match operation:
        case AddCondition(condition=condition):
            return config.copy_with(filter_conditions=(*config.filter_conditions, condition))

        case UpdateCondition(condition_id=cid, changes=changes):
            changes = _allowed(changes, UPDATABLE_CONDITION_FIELDS)
            return config.copy_with(filter_conditions=tuple(
                c.copy_with(**changes) if c.id == cid else c for c in config.filter_conditions
            ))

        case RemoveCondition(condition_id=cid):
            return config.copy_with(
                filter_conditions=tuple(c for c in config.filter_conditions if c.id != cid)
            )

        case MoveCondition(from_index=src, to_index=dst):
            moved = _moved(config.filter_conditions, src, dst)
            return config if moved is None else config.copy_with(filter_conditions=moved)

        case ToggleCondition(condition_id=cid):
            return config.copy_with(filter_conditions=tuple(
                c.copy_with(enabled=not c.enabled) if c.id == cid else c for c in config.filter_conditions
            ))

        case DuplicateCondition(condition_id=cid, new_id=new_id, enabled=enabled):
            source = config.find_condition(cid)
            if source is None:
                return config
            clone = FilterCondition(
                id=new_id,
                field=source.field,
                operator=source.operator,
                value=source.value,
                logical_operator=source.logical_operator,
                enabled=enabled,
            )
            return config.copy_with(filter_conditions=(*config.filter_conditions, clone))

        case ClearConditions():
            return config.copy_with(filter_conditions=())

        case SetGlobalSearch(text=text):
            return config.copy_with(global_search=text)

        case AddSort(sort=sort):
            return config.copy_with(sort_conditions=(*config.sort_conditions, sort))

        case UpdateSort(sort_id=sid, changes=changes):
            changes = _allowed(changes, UPDATABLE_SORT_FIELDS)
            return config.copy_with(sort_conditions=tuple(
                s.copy_with(**changes) if s.id == sid else s for s in config.sort_conditions
            ))

        case RemoveSort(sort_id=sid):
            return config.copy_with(sort_conditions=tuple(s for s in config.sort_conditions if s.id != sid))

        case MoveSort(from_index=src, to_index=dst):
            moved = _moved(config.sort_conditions, src, dst)
            return config if moved is None else config.copy_with(sort_conditions=moved)

        case ToggleSortOrder(sort_id=sid):
            return config.copy_with(sort_conditions=tuple(
                s.copy_with(order=SortOrder.ASC if s.order is SortOrder.DESC else SortOrder.DESC)
                if s.id == sid else s
                for s in config.sort_conditions
            ))

        case SetSorting(sorts=sorts):
            return config.copy_with(sort_conditions=tuple(sorts))

        case ClearSorting():
            return config.copy_with(sort_conditions=())

        case SetDefaultLogicalOperator(operator=op):
            return config.copy_with(default_logical_operator=op)

        case ApplyDecoded(decoded=decoded):
            return config.copy_with(**decoded)

        case ReplaceConfig(config=replacement):
            return replacement

    raise TypeError(f"Unsupported builder operation: {operation!r}")
