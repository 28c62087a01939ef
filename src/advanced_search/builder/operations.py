"""Builder operations – one immutable record per kind of change.

Fresh ids are allocated by the caller before an operation is built, so reducing
the same operation on the same configuration always gives the same result.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Union

from advanced_search.codec.decoder import DecodedConfig
from advanced_search.model.conditions import FilterCondition, LogicalOperator, SortCondition
from advanced_search.model.config import SearchConfig

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
    "SetDefaultLogicalOperator",
    "SetGlobalSearch",
    "SetSorting",
    "ToggleCondition",
    "ToggleSortOrder",
    "UPDATABLE_CONDITION_FIELDS",
    "UPDATABLE_SORT_FIELDS",
    "UpdateCondition",
    "UpdateSort",
]

UPDATABLE_CONDITION_FIELDS = frozenset({"field", "operator", "value", "logical_operator", "enabled"})
UPDATABLE_SORT_FIELDS = frozenset({"field", "order"})


@dataclasses.dataclass(frozen=True)
class AddCondition:
    condition: FilterCondition


@dataclasses.dataclass(frozen=True)
class UpdateCondition:
    condition_id: str
    changes: dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class RemoveCondition:
    condition_id: str


@dataclasses.dataclass(frozen=True)
class MoveCondition:
    from_index: int
    to_index: int


@dataclasses.dataclass(frozen=True)
class ToggleCondition:
    condition_id: str


@dataclasses.dataclass(frozen=True)
class DuplicateCondition:
    """Append a clone of ``condition_id`` under ``new_id``."""
    condition_id: str
    new_id: str
    enabled: bool = True


@dataclasses.dataclass(frozen=True)
class ClearConditions:
    pass


@dataclasses.dataclass(frozen=True)
class SetGlobalSearch:
    text: str


@dataclasses.dataclass(frozen=True)
class AddSort:
    sort: SortCondition


@dataclasses.dataclass(frozen=True)
class UpdateSort:
    sort_id: str
    changes: dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class RemoveSort:
    sort_id: str


@dataclasses.dataclass(frozen=True)
class MoveSort:
    from_index: int
    to_index: int


@dataclasses.dataclass(frozen=True)
class ToggleSortOrder:
    sort_id: str


@dataclasses.dataclass(frozen=True)
class SetSorting:
    sorts: tuple[SortCondition, ...]


@dataclasses.dataclass(frozen=True)
class ClearSorting:
    pass


@dataclasses.dataclass(frozen=True)
class SetDefaultLogicalOperator:
    operator: LogicalOperator | None


@dataclasses.dataclass(frozen=True)
class ApplyDecoded:
    """Shallow-merge decoded wire fields over the current configuration."""
    decoded: DecodedConfig


@dataclasses.dataclass(frozen=True)
class ReplaceConfig:
    config: SearchConfig


Operation = Union[
    AddCondition,
    UpdateCondition,
    RemoveCondition,
    MoveCondition,
    ToggleCondition,
    DuplicateCondition,
    ClearConditions,
    SetGlobalSearch,
    AddSort,
    UpdateSort,
    RemoveSort,
    MoveSort,
    ToggleSortOrder,
    SetSorting,
    ClearSorting,
    SetDefaultLogicalOperator,
    ApplyDecoded,
    ReplaceConfig,
]
