"""Builder – operation records, the pure reducer and the SearchBuilder session."""
from advanced_search.builder.operations import (
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
from advanced_search.builder.reducer import reduce
from advanced_search.builder.session import SearchBuilder, SortSpec

__all__ = [
    "AddCondition",
    "AddSort",
    "ApplyDecoded",
    "ClearConditions",
    "ClearSorting",
    "DuplicateCondition",
    "MoveCondition",
    "MoveSort",
    "Operation",
    "RemoveCondition",
    "RemoveSort",
    "ReplaceConfig",
    "SearchBuilder",
    "SetDefaultLogicalOperator",
    "SetGlobalSearch",
    "SetSorting",
    "SortSpec",
    "ToggleCondition",
    "ToggleSortOrder",
    "UpdateCondition",
    "UpdateSort",
    "reduce",
]
