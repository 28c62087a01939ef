"""SearchConfig – the aggregate root of one editing session."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterator

from advanced_search.model.conditions import FilterCondition, LogicalOperator, SortCondition

__all__ = ["SearchConfig"]


@dataclasses.dataclass(frozen=True)
class SearchConfig:
    """Ordered filter conditions, ordered sort conditions, free text and the
    default combinator.

    Instances are never mutated; every change produces a new value via
    :meth:`copy_with`.  List order is meaningful (filter grouping, sort
    priority) and is only changed by explicit move operations.
    """

    filter_conditions: tuple[FilterCondition, ...] = ()
    sort_conditions: tuple[SortCondition, ...] = ()
    global_search: str = ""
    default_logical_operator: LogicalOperator | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "filter_conditions", tuple(self.filter_conditions))
        object.__setattr__(self, "sort_conditions", tuple(self.sort_conditions))
        if self.global_search is None:
            object.__setattr__(self, "global_search", "")
        if self.default_logical_operator is not None:
            object.__setattr__(
                self, "default_logical_operator", LogicalOperator(self.default_logical_operator)
            )

    def copy_with(self, **changes: Any) -> "SearchConfig":
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)

    def find_condition(self, condition_id: str) -> FilterCondition | None:
        for c in self.filter_conditions:
            if c.id == condition_id:
                return c
        return None

    def find_sort(self, sort_id: str) -> SortCondition | None:
        for s in self.sort_conditions:
            if s.id == sort_id:
                return s
        return None

    def enabled_conditions(self) -> Iterator[FilterCondition]:
        return (c for c in self.filter_conditions if c.enabled)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for logging and change consumers."""
        return {
            "filter_conditions": [
                {
                    "id": c.id,
                    "field": c.field,
                    "operator": c.operator,
                    "value": c.value,
                    "logical_operator": c.logical_operator.value,
                    "enabled": c.enabled,
                }
                for c in self.filter_conditions
            ],
            "sort_conditions": [{"id": s.id, **s.to_wire()} for s in self.sort_conditions],
            "global_search": self.global_search,
            "default_logical_operator": (
                self.default_logical_operator.value if self.default_logical_operator else None
            ),
        }
