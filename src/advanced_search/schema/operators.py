"""Operator catalog – value-shape requirements and field-type support per operator.

The catalog is an immutable value injected into the validator, the codec and
the builder.  :data:`DEFAULT_CATALOG` holds the built-in operators in
declaration order; that order drives :meth:`OperatorCatalog.operators_supporting`
and therefore the default operator chosen for a field type.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, Iterator

from advanced_search.kernel.errors import InvariantViolationError, SchemaError
from advanced_search.schema.fields import FieldType

__all__ = [
    "DEFAULT_CATALOG",
    "OperatorCatalog",
    "OperatorDescriptor",
    "OperatorId",
    "ValueShape",
]


class OperatorId(str, Enum):
    EQ = "eq"
    NEQ = "neq"
    IN = "in"
    NOT_IN = "notIn"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    REGEX = "regex"
    ILIKE = "ilike"
    IS_NULL = "isNull"
    IS_NOT_NULL = "isNotNull"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    BETWEEN = "between"


class ValueShape(str, Enum):
    """The kind of value an operator expects."""
    NONE = "none"
    SCALAR = "scalar"
    LIST = "list"
    RANGE = "range"


@dataclasses.dataclass(frozen=True)
class OperatorDescriptor:
    """One catalog entry.

    ``requires_array`` and ``requires_range`` are mutually exclusive, and either
    of them implies ``requires_value``.
    """

    id: str
    requires_value: bool
    supported_types: frozenset[FieldType]
    requires_array: bool = False
    requires_range: bool = False
    label: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(getattr(self.id, "value", self.id)))
        object.__setattr__(self, "supported_types", frozenset(FieldType(t) for t in self.supported_types))
        if self.requires_array and self.requires_range:
            raise InvariantViolationError(
                f"Operator '{self.id}' cannot require both an array and a range",
                detail={"operator": self.id},
            )
        if (self.requires_array or self.requires_range) and not self.requires_value:
            object.__setattr__(self, "requires_value", True)

    @property
    def shape(self) -> ValueShape:
        if self.requires_array:
            return ValueShape.LIST
        if self.requires_range:
            return ValueShape.RANGE
        if self.requires_value:
            return ValueShape.SCALAR
        return ValueShape.NONE

    def supports(self, field_type: FieldType | str) -> bool:
        try:
            return FieldType(field_type) in self.supported_types
        except ValueError:
            return False


class OperatorCatalog:
    """Ordered lookup table of :class:`OperatorDescriptor` keyed by id."""

    __slots__ = ("_descriptors", "_by_id")

    def __init__(self, descriptors: Iterable[OperatorDescriptor]) -> None:
        by_id: dict[str, OperatorDescriptor] = {}
        for d in descriptors:
            if d.id in by_id:
                raise SchemaError(f"Duplicate operator id '{d.id}'", detail={"operator": d.id})
            by_id[d.id] = d
        self._descriptors: tuple[OperatorDescriptor, ...] = tuple(by_id.values())
        self._by_id = by_id

    def describe(self, operator_id: str) -> OperatorDescriptor | None:
        """Return the descriptor for *operator_id*, or ``None`` when unknown."""
        return self._by_id.get(str(getattr(operator_id, "value", operator_id)))

    def operators_supporting(self, field_type: FieldType | str) -> list[OperatorDescriptor]:
        return [d for d in self._descriptors if d.supports(field_type)]

    def default_operator_for(self, field_type: FieldType | str) -> OperatorDescriptor | None:
        """First operator, in declaration order, that supports *field_type*."""
        for d in self._descriptors:
            if d.supports(field_type):
                return d
        return None

    def extended(self, *descriptors: OperatorDescriptor) -> "OperatorCatalog":
        """Return a new catalog with *descriptors* appended."""
        return OperatorCatalog((*self._descriptors, *descriptors))

    def __contains__(self, operator_id: object) -> bool:
        return self.describe(operator_id) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[OperatorDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


_ALL = frozenset(FieldType)
_ORDERED = frozenset({FieldType.NUMBER, FieldType.DATE})
_LISTABLE = frozenset({FieldType.STRING, FieldType.NUMBER, FieldType.ENUM})
_TEXT = frozenset({FieldType.STRING})

DEFAULT_CATALOG = OperatorCatalog([
    OperatorDescriptor(OperatorId.EQ, True, _ALL, label="equals", description="Matches the value exactly"),
    OperatorDescriptor(OperatorId.NEQ, True, _ALL, label="not equals", description="Does not match the value"),
    OperatorDescriptor(OperatorId.IN, True, _LISTABLE, requires_array=True,
                       label="in", description="Value is one of the listed values"),
    OperatorDescriptor(OperatorId.NOT_IN, True, _LISTABLE, requires_array=True,
                       label="not in", description="Value is none of the listed values"),
    OperatorDescriptor(OperatorId.CONTAINS, True, _TEXT, label="contains", description="Contains the substring"),
    OperatorDescriptor(OperatorId.STARTS_WITH, True, _TEXT, label="starts with", description="Starts with the text"),
    OperatorDescriptor(OperatorId.ENDS_WITH, True, _TEXT, label="ends with", description="Ends with the text"),
    OperatorDescriptor(OperatorId.REGEX, True, _TEXT, label="matches", description="Matches a regular expression"),
    OperatorDescriptor(OperatorId.ILIKE, True, _TEXT, label="like", description="Case-insensitive fuzzy match"),
    OperatorDescriptor(OperatorId.IS_NULL, False, _ALL, label="is empty", description="Value is empty or unset"),
    OperatorDescriptor(OperatorId.IS_NOT_NULL, False, _ALL, label="is not empty", description="Value is set"),
    OperatorDescriptor(OperatorId.GT, True, _ORDERED, label="greater than"),
    OperatorDescriptor(OperatorId.GTE, True, _ORDERED, label="greater or equal"),
    OperatorDescriptor(OperatorId.LT, True, _ORDERED, label="less than"),
    OperatorDescriptor(OperatorId.LTE, True, _ORDERED, label="less or equal"),
    OperatorDescriptor(OperatorId.BETWEEN, True, _ORDERED, requires_range=True,
                       label="between", description="Within the range, bounds included"),
])
