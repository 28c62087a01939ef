"""Condition model – filter/sort conditions, value variants and SearchConfig."""
from advanced_search.model.conditions import (
    FilterCondition,
    LogicalOperator,
    SortCondition,
    SortOrder,
    create_filter_condition,
    create_sort_condition,
)
from advanced_search.model.config import SearchConfig
from advanced_search.model.values import (
    ConditionValue,
    ListValue,
    NoValue,
    RangeValue,
    Scalar,
    is_sequence,
    restore_value,
    shape_value,
)

__all__ = [
    "ConditionValue",
    "FilterCondition",
    "ListValue",
    "LogicalOperator",
    "NoValue",
    "RangeValue",
    "Scalar",
    "SearchConfig",
    "SortCondition",
    "SortOrder",
    "create_filter_condition",
    "create_sort_condition",
    "is_sequence",
    "restore_value",
    "shape_value",
]
