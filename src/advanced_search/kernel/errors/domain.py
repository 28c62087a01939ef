"""Domain errors – static declaration problems and refused builder operations."""

from __future__ import annotations

from typing import Any

from advanced_search.kernel.errors.base import BaseError


class InvariantViolationError(BaseError):
    """A value object was declared in a way that breaks its invariants."""

    default_code = "invariant_violation"


class SchemaError(BaseError):
    """A field schema or operator catalog declaration is inconsistent."""

    default_code = "schema_error"


class SearchError(BaseError):
    """Base for operations the builder refuses to apply."""

    default_code = "search_error"


class ConditionNotFoundError(SearchError):
    """No condition with the given id exists in the current configuration."""

    default_code = "condition_not_found"

    def __init__(self, condition_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"Condition '{condition_id}' not found",
            detail={"condition_id": condition_id},
            **kwargs,
        )
        self.condition_id = condition_id


class DuplicateConditionError(SearchError):
    """Two enabled filter conditions would share one ``field[operator]`` key."""

    default_code = "duplicate_condition"

    def __init__(self, field: str, operator: str, **kwargs: Any) -> None:
        super().__init__(
            f"An enabled condition for '{field}[{operator}]' already exists",
            detail={"field": field, "operator": operator},
            **kwargs,
        )
        self.field = field
        self.operator = operator


class ConditionLimitError(SearchError):
    """The configuration already holds the maximum number of filter conditions."""

    default_code = "condition_limit"

    def __init__(self, limit: int, **kwargs: Any) -> None:
        super().__init__(
            f"At most {limit} conditions are allowed",
            detail={"limit": limit},
            **kwargs,
        )
        self.limit = limit


class InvalidUpdateError(SearchError):
    """A partial update names attributes that cannot be changed."""

    default_code = "invalid_update"

    def __init__(self, keys: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Cannot update attribute(s): {', '.join(sorted(keys))}",
            detail={"keys": sorted(keys)},
            **kwargs,
        )
        self.keys = sorted(keys)


class InvalidValueError(SearchError):
    """An argument is not one of the values the operation accepts."""

    default_code = "invalid_value"

    def __init__(self, name: str, value: Any, allowed: list[str] | None = None, **kwargs: Any) -> None:
        detail: dict[str, Any] = {"name": name, "value": value}
        if allowed is not None:
            detail["allowed"] = allowed
        super().__init__(f"Invalid {name}: {value!r}", detail=detail, **kwargs)
        self.name = name
        self.value = value


__all__ = [
    "ConditionLimitError",
    "ConditionNotFoundError",
    "DuplicateConditionError",
    "InvalidUpdateError",
    "InvalidValueError",
    "InvariantViolationError",
    "SchemaError",
    "SearchError",
]
