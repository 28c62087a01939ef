"""Field schema – the declared set of searchable, sortable fields."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator, Sequence

from advanced_search.kernel.errors import SchemaError

__all__ = ["FieldOption", "FieldSchema", "FieldType", "SearchField"]


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    ENUM = "enum"


@dataclasses.dataclass(frozen=True)
class FieldOption:
    """One selectable value of an ``enum`` field."""
    value: str
    label: str = ""


def _to_option(raw: "FieldOption | str | dict") -> FieldOption:
    if isinstance(raw, FieldOption):
        return raw
    if isinstance(raw, str):
        return FieldOption(raw, raw)
    return FieldOption(**raw)


@dataclasses.dataclass(frozen=True)
class SearchField:
    """Declaration of one searchable attribute.

    ``label``, ``description``, ``group``, ``visible`` and ``enable_hiding``
    are display metadata; only ``key``, ``type``, ``options`` and ``sortable``
    take part in validation.
    """

    key: str
    label: str
    type: FieldType
    options: tuple[FieldOption, ...] = ()
    sortable: bool = True
    visible: bool = True
    enable_hiding: bool = True
    description: str = ""
    group: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise SchemaError("SearchField.key must not be empty")
        try:
            object.__setattr__(self, "type", FieldType(self.type))
        except ValueError as exc:
            raise SchemaError(f"Unknown field type {self.type!r} for '{self.key}'", cause=exc) from exc
        object.__setattr__(self, "options", tuple(_to_option(o) for o in self.options))
        if self.type is FieldType.ENUM and not self.options:
            raise SchemaError(
                f"Enum field '{self.key}' must declare at least one option",
                detail={"field": self.key},
            )


class FieldSchema:
    """Ordered, immutable collection of :class:`SearchField` with unique keys."""

    __slots__ = ("_fields", "_by_key")

    def __init__(self, fields: Sequence[SearchField]) -> None:
        by_key: dict[str, SearchField] = {}
        for f in fields:
            if f.key in by_key:
                raise SchemaError(f"Duplicate field key '{f.key}'", detail={"field": f.key})
            by_key[f.key] = f
        self._fields: tuple[SearchField, ...] = tuple(fields)
        self._by_key = by_key

    @classmethod
    def coerce(cls, fields: "FieldSchema | Sequence[SearchField]") -> "FieldSchema":
        return fields if isinstance(fields, FieldSchema) else cls(fields)

    def get(self, key: str) -> SearchField | None:
        return self._by_key.get(key)

    def type_of(self, key: str) -> FieldType | None:
        f = self._by_key.get(key)
        return f.type if f is not None else None

    def sortable_fields(self) -> list[SearchField]:
        return [f for f in self._fields if f.sortable]

    def visible_fields(self) -> list[SearchField]:
        return [f for f in self._fields if f.visible]

    def hideable_fields(self) -> list[SearchField]:
        return [f for f in self._fields if f.enable_hiding]

    def enum_values(self, key: str) -> list[str]:
        f = self._by_key.get(key)
        if f is None:
            return []
        return [o.value for o in f.options]

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[SearchField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSchema({[f.key for f in self._fields]!r})"
