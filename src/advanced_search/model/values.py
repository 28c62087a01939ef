"""Condition values as a tagged variant selected by the operator's shape.

A :class:`~advanced_search.model.conditions.FilterCondition` keeps whatever
value the caller supplied.  :func:`shape_value` reads that raw value through the
operator's declared :class:`~advanced_search.schema.ValueShape` and returns the
matching variant, or ``None`` when the raw value does not fit.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from advanced_search.schema.operators import OperatorDescriptor, ValueShape

__all__ = [
    "ConditionValue",
    "ListValue",
    "NoValue",
    "RangeValue",
    "Scalar",
    "is_sequence",
    "restore_value",
    "shape_value",
]


@dataclasses.dataclass(frozen=True)
class NoValue:
    def to_wire(self) -> Any:
        return True


@dataclasses.dataclass(frozen=True)
class Scalar:
    value: Any

    def to_wire(self) -> Any:
        return self.value


@dataclasses.dataclass(frozen=True)
class ListValue:
    items: tuple[Any, ...]

    def to_wire(self) -> Any:
        return list(self.items)


@dataclasses.dataclass(frozen=True)
class RangeValue:
    low: Any
    high: Any

    def to_wire(self) -> Any:
        return [self.low, self.high]


type ConditionValue = NoValue | Scalar | ListValue | RangeValue


def is_sequence(raw: Any) -> bool:
    """Lists and tuples count as ordered collections; strings do not."""
    return isinstance(raw, (list, tuple))


def shape_value(descriptor: OperatorDescriptor, raw: Any) -> ConditionValue | None:
    match descriptor.shape:
        case ValueShape.NONE:
            return NoValue()
        case ValueShape.SCALAR:
            return None if raw is None else Scalar(raw)
        case ValueShape.LIST:
            if is_sequence(raw) and len(raw) > 0:
                return ListValue(tuple(raw))
            return None
        case ValueShape.RANGE:
            if is_sequence(raw) and len(raw) == 2:  # noqa: PLR2004
                return RangeValue(raw[0], raw[1])
            return None
    return None


def restore_value(descriptor: OperatorDescriptor, wire: Any) -> Any:
    """Turn a decoded wire value back into the form callers construct.

    No-value operators carry ``None``, ranges a ``(low, high)`` tuple and lists a
    ``list``.  A wire value that does not fit the shape is kept as is so that
    validation can report it.
    """
    match descriptor.shape:
        case ValueShape.NONE:
            return None
        case ValueShape.LIST if is_sequence(wire):
            return list(wire)
        case ValueShape.RANGE if is_sequence(wire) and len(wire) == 2:  # noqa: PLR2004
            return (wire[0], wire[1])
    return wire
