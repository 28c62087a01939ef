"""Unit tests for the operator catalog."""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from advanced_search.kernel.errors import InvariantViolationError, SchemaError
from advanced_search.schema import (
    DEFAULT_CATALOG,
    FieldType,
    OperatorCatalog,
    OperatorDescriptor,
    OperatorId,
    ValueShape,
)


class TestOperatorDescriptor:
    def test_array_and_range_are_exclusive(self) -> None:
        with pytest.raises(InvariantViolationError):
            OperatorDescriptor("weird", True, {FieldType.NUMBER}, requires_array=True, requires_range=True)

    def test_array_implies_value(self) -> None:
        d = OperatorDescriptor("anyOf", False, {FieldType.STRING}, requires_array=True)
        assert d.requires_value is True
        assert d.shape is ValueShape.LIST

    def test_id_and_types_normalised(self) -> None:
        d = OperatorDescriptor(OperatorId.EQ, True, ["string"])
        assert d.id == "eq"
        assert d.supported_types == frozenset({FieldType.STRING})

    def test_shapes(self) -> None:
        assert DEFAULT_CATALOG.describe("isNull").shape is ValueShape.NONE
        assert DEFAULT_CATALOG.describe("eq").shape is ValueShape.SCALAR
        assert DEFAULT_CATALOG.describe("in").shape is ValueShape.LIST
        assert DEFAULT_CATALOG.describe("between").shape is ValueShape.RANGE

    def test_supports_unknown_type_is_false(self) -> None:
        assert DEFAULT_CATALOG.describe("eq").supports("uuid") is False


class TestDefaultCatalog:
    def test_contains_every_operator_id(self) -> None:
        assert [d.id for d in DEFAULT_CATALOG] == [o.value for o in OperatorId]
        assert len(DEFAULT_CATALOG) == 16

    def test_unknown_operator(self) -> None:
        assert DEFAULT_CATALOG.describe("fuzzy") is None
        assert "fuzzy" not in DEFAULT_CATALOG
        assert "eq" in DEFAULT_CATALOG

    def test_ordered_operators_exclude_strings(self) -> None:
        for op in ("gt", "gte", "lt", "lte", "between"):
            d = DEFAULT_CATALOG.describe(op)
            assert d.supports(FieldType.NUMBER)
            assert d.supports(FieldType.DATE)
            assert not d.supports(FieldType.STRING)

    def test_text_operators_only_for_strings(self) -> None:
        for op in ("contains", "startsWith", "endsWith", "regex", "ilike"):
            assert DEFAULT_CATALOG.describe(op).supported_types == frozenset({FieldType.STRING})

    def test_null_checks_take_no_value(self) -> None:
        assert DEFAULT_CATALOG.describe("isNull").requires_value is False
        assert DEFAULT_CATALOG.describe("isNotNull").requires_value is False

    def test_operators_supporting_boolean(self) -> None:
        ids = [d.id for d in DEFAULT_CATALOG.operators_supporting(FieldType.BOOLEAN)]
        assert ids == ["eq", "neq", "isNull", "isNotNull"]

    def test_default_operator_is_first_supporting(self) -> None:
        assert DEFAULT_CATALOG.default_operator_for(FieldType.STRING).id == "eq"

    @given(st.sampled_from(list(FieldType)))
    def test_default_operator_supports_type(self, field_type: FieldType) -> None:
        descriptor = DEFAULT_CATALOG.default_operator_for(field_type)
        assert descriptor is not None
        assert field_type in descriptor.supported_types


class TestCustomCatalog:
    def test_duplicate_id_raises(self) -> None:
        eq = DEFAULT_CATALOG.describe("eq")
        with pytest.raises(SchemaError):
            OperatorCatalog([eq, eq])

    def test_extended(self) -> None:
        extra = OperatorDescriptor("hasAny", True, {FieldType.STRING}, requires_array=True)
        catalog = DEFAULT_CATALOG.extended(extra)
        assert "hasAny" in catalog
        assert "hasAny" not in DEFAULT_CATALOG
        assert len(catalog) == len(DEFAULT_CATALOG) + 1

    def test_default_operator_none_when_nothing_supports(self) -> None:
        catalog = OperatorCatalog([OperatorDescriptor("contains", True, {FieldType.STRING})])
        assert catalog.default_operator_for(FieldType.NUMBER) is None
