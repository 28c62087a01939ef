"""Optional per-condition rules layered on top of the core checks.

The core validator only emits ``required`` and ``invalid``.  Rules here are
opt-in and produce the reserved ``format`` and ``range`` kinds.
"""
from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from advanced_search.model.conditions import FilterCondition
from advanced_search.schema.fields import FieldType
from advanced_search.schema.operators import OperatorDescriptor, OperatorId, ValueShape
from advanced_search.validation.errors import SearchValidationError, ValidationErrorKind

__all__ = ["ConditionRule", "RangeOrderRule", "RegexPatternRule"]


@runtime_checkable
class ConditionRule(Protocol):
    def check(
        self,
        condition: FilterCondition,
        descriptor: OperatorDescriptor,
        field_type: FieldType,
    ) -> SearchValidationError | None: ...


class RegexPatternRule:
    """Reject ``regex`` conditions whose pattern does not compile."""

    def __init__(self, operator_ids: frozenset[str] = frozenset({OperatorId.REGEX.value})) -> None:
        self._operator_ids = operator_ids

    def check(
        self,
        condition: FilterCondition,
        descriptor: OperatorDescriptor,
        field_type: FieldType,  # noqa: ARG002
    ) -> SearchValidationError | None:
        if descriptor.id not in self._operator_ids or not isinstance(condition.value, str):
            return None
        try:
            re.compile(condition.value)
        except re.error as exc:
            return SearchValidationError(
                condition_id=condition.id,
                field=condition.field,
                message=f"invalid regular expression: {exc}",
                kind=ValidationErrorKind.FORMAT,
            )
        return None


class RangeOrderRule:
    """Reject ranges whose lower bound is greater than the upper bound."""

    def check(
        self,
        condition: FilterCondition,
        descriptor: OperatorDescriptor,
        field_type: FieldType,  # noqa: ARG002
    ) -> SearchValidationError | None:
        if descriptor.shape is not ValueShape.RANGE:
            return None
        low, high = condition.value[0], condition.value[1]
        try:
            reversed_bounds = low > high
        except TypeError:
            return SearchValidationError(
                condition_id=condition.id,
                field=condition.field,
                message="range bounds are not comparable",
                kind=ValidationErrorKind.RANGE,
            )
        if reversed_bounds:
            return SearchValidationError(
                condition_id=condition.id,
                field=condition.field,
                message="range start must not be greater than range end",
                kind=ValidationErrorKind.RANGE,
            )
        return None
