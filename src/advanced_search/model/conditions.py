"""Filter and sort conditions plus their constructors."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from advanced_search.kernel.types import new_condition_id

__all__ = [
    "FilterCondition",
    "LogicalOperator",
    "SortCondition",
    "SortOrder",
    "create_filter_condition",
    "create_sort_condition",
]


class LogicalOperator(str, Enum):
    AND = "and"
    OR = "or"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class FilterCondition:
    """One ``(field, operator, value)`` filter.

    ``logical_operator`` joins this condition to the *next* one in the list.
    ``value`` is stored exactly as supplied; its shape is checked by the
    validator, never here.
    """

    id: str
    field: str
    operator: str
    value: Any = None
    logical_operator: LogicalOperator = LogicalOperator.AND
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", str(getattr(self.operator, "value", self.operator)))
        object.__setattr__(self, "logical_operator", LogicalOperator(self.logical_operator))

    @property
    def key(self) -> tuple[str, str]:
        """The ``(field, operator)`` pair that becomes one wire key."""
        return (self.field, self.operator)

    def copy_with(self, **changes: Any) -> "FilterCondition":
        return dataclasses.replace(self, **changes)


@dataclasses.dataclass(frozen=True)
class SortCondition:
    id: str
    field: str
    order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", SortOrder(self.order))

    def copy_with(self, **changes: Any) -> "SortCondition":
        return dataclasses.replace(self, **changes)

    def to_wire(self) -> dict[str, str]:
        return {"field": self.field, "order": self.order.value}


def create_filter_condition(field: str, operator: str, value: Any = None) -> FilterCondition:
    """Allocate a new enabled AND-joined condition; never validates."""
    return FilterCondition(id=new_condition_id(), field=field, operator=operator, value=value)


def create_sort_condition(field: str, order: SortOrder | str = SortOrder.ASC) -> SortCondition:
    return SortCondition(id=new_condition_id("sort"), field=field, order=SortOrder(order))
