"""Unit tests for condition and configuration validation."""
from __future__ import annotations

from typing import Any

from hypothesis import given, strategies as st

from advanced_search.model import FilterCondition, SearchConfig, SortCondition, create_filter_condition
from advanced_search.schema import DEFAULT_CATALOG, FieldSchema, FieldType, SearchField
from advanced_search.testing.strategies import value_strategy
from advanced_search.validation import (
    SearchValidationError,
    ValidationErrorKind,
    validate_condition,
    validate_config,
    validate_sort_condition,
)


def _schema() -> FieldSchema:
    return FieldSchema([
        SearchField("title", "Title", FieldType.STRING),
        SearchField("severity", "Severity", FieldType.NUMBER),
        SearchField("status", "Status", FieldType.ENUM, options=("PENDING", "DONE")),
        SearchField("createdAt", "Created", FieldType.DATE),
        SearchField("notes", "Notes", FieldType.STRING, sortable=False),
    ])


def _field_for(field_type: FieldType) -> SearchField:
    options = ("A", "B") if field_type is FieldType.ENUM else ()
    return SearchField("f", "F", field_type, options=options)


# ---------------------------------------------------------------------------
# validate_condition
# ---------------------------------------------------------------------------


class TestValidateCondition:
    def test_valid_scalar(self) -> None:
        c = create_filter_condition("title", "contains", "bug")
        assert validate_condition(c, FieldType.STRING) is None

    def test_unknown_operator(self) -> None:
        c = create_filter_condition("title", "fuzzy", "bug")
        err = validate_condition(c, FieldType.STRING)
        assert err.kind is ValidationErrorKind.INVALID

    def test_type_mismatch(self) -> None:
        c = create_filter_condition("title", "gt", 3)
        err = validate_condition(c, FieldType.STRING)
        assert err.kind is ValidationErrorKind.INVALID
        assert err.message == "operator 'gt' is not supported for string fields"
        assert err.condition_id == c.id
        assert err.field == "title"

    def test_missing_value(self) -> None:
        for value in (None, ""):
            err = validate_condition(create_filter_condition("title", "eq", value), FieldType.STRING)
            assert err.kind is ValidationErrorKind.REQUIRED

    def test_falsy_values_are_present(self) -> None:
        assert validate_condition(create_filter_condition("severity", "eq", 0), FieldType.NUMBER) is None
        assert validate_condition(create_filter_condition("active", "eq", False), FieldType.BOOLEAN) is None

    def test_null_check_needs_no_value(self) -> None:
        c = create_filter_condition("title", "isNotNull")
        assert validate_condition(c, FieldType.STRING) is None

    def test_array_operator_requires_non_empty_list(self) -> None:
        for bad in ([], "PENDING", 3):
            err = validate_condition(create_filter_condition("status", "in", bad), FieldType.ENUM)
            assert err.kind is ValidationErrorKind.REQUIRED
        assert validate_condition(create_filter_condition("status", "in", ["PENDING"]), FieldType.ENUM) is None

    def test_range_requires_two_bounds(self) -> None:
        for bad in (["2024-01-01"], "2024-01-01", ["2024-01-01", None], [None, "2024-01-31"]):
            err = validate_condition(create_filter_condition("createdAt", "between", bad), FieldType.DATE)
            assert err.kind is ValidationErrorKind.REQUIRED
        ok = create_filter_condition("createdAt", "between", ["2024-01-01", "2024-01-31"])
        assert validate_condition(ok, FieldType.DATE) is None

    def test_to_dict(self) -> None:
        err = SearchValidationError("c1", "title", "msg", ValidationErrorKind.REQUIRED)
        assert err.to_dict() == {"conditionId": "c1", "field": "title", "message": "msg", "type": "required"}


class TestCompatibilityMatrix:
    @given(
        st.sampled_from(list(DEFAULT_CATALOG)),
        st.sampled_from(list(FieldType)),
        st.data(),
    )
    def test_supported_pairs_pass_and_others_are_invalid(self, descriptor, field_type, data) -> None:
        field = _field_for(field_type)
        if descriptor.supports(field_type):
            value: Any = data.draw(value_strategy(descriptor, field))
        else:
            value = data.draw(st.sampled_from([None, "x", ["x"], [1, 2]]))
        condition = create_filter_condition("f", descriptor.id, value)
        error = validate_condition(condition, field_type)
        if descriptor.supports(field_type):
            assert error is None
        else:
            assert error is not None
            assert error.kind is ValidationErrorKind.INVALID

    @given(st.sampled_from(["in", "notIn"]), st.lists(st.integers(), min_size=1, max_size=5))
    def test_any_non_empty_list_satisfies_array_operators(self, operator, values) -> None:
        condition = create_filter_condition("f", operator, values)
        assert validate_condition(condition, FieldType.NUMBER) is None


# ---------------------------------------------------------------------------
# validate_config
# ---------------------------------------------------------------------------


class TestValidateConfig:
    def test_valid_config(self) -> None:
        config = SearchConfig(
            filter_conditions=(
                create_filter_condition("status", "eq", "PENDING"),
                create_filter_condition("createdAt", "between", ["2024-01-01", "2024-01-31"]),
            ),
            sort_conditions=(SortCondition("s1", "severity", "desc"),),
        )
        assert validate_config(config, _schema()) == []

    def test_disabled_conditions_are_exempt(self) -> None:
        broken = create_filter_condition("title", "gt", None).copy_with(enabled=False)
        assert validate_config(SearchConfig(filter_conditions=(broken,)), _schema()) == []

    def test_errors_keep_condition_order(self) -> None:
        a = create_filter_condition("title", "eq", "")
        b = create_filter_condition("severity", "contains", "x")
        errors = validate_config(SearchConfig(filter_conditions=(a, b)), _schema())
        assert [(e.condition_id, e.kind) for e in errors] == [
            (a.id, ValidationErrorKind.REQUIRED),
            (b.id, ValidationErrorKind.INVALID),
        ]

    def test_unknown_field(self) -> None:
        c = create_filter_condition("ghost", "eq", 1)
        errors = validate_config(SearchConfig(filter_conditions=(c,)), _schema())
        assert errors[0].kind is ValidationErrorKind.INVALID
        assert errors[0].message == "unknown field"

    def test_duplicate_enabled_pair(self) -> None:
        a = create_filter_condition("status", "eq", "PENDING")
        b = create_filter_condition("status", "eq", "DONE")
        errors = validate_config(SearchConfig(filter_conditions=(a, b)), _schema())
        assert len(errors) == 1
        assert errors[0].condition_id == b.id

    def test_duplicate_pair_allowed_when_one_disabled(self) -> None:
        a = create_filter_condition("status", "eq", "PENDING")
        b = create_filter_condition("status", "eq", "DONE").copy_with(enabled=False)
        assert validate_config(SearchConfig(filter_conditions=(a, b)), _schema()) == []

    def test_sort_on_unsortable_or_unknown_field(self) -> None:
        config = SearchConfig(sort_conditions=(
            SortCondition("s1", "notes"),
            SortCondition("s2", "ghost"),
        ))
        errors = validate_config(config, _schema())
        assert [e.condition_id for e in errors] == ["s1", "s2"]
        assert all(e.kind is ValidationErrorKind.INVALID for e in errors)

    def test_accepts_field_list(self) -> None:
        config = SearchConfig(filter_conditions=(FilterCondition("c1", "title", "eq", "x"),))
        assert validate_config(config, list(_schema())) == []


class TestValidateSortCondition:
    def test_sortable(self) -> None:
        assert validate_sort_condition(SortCondition("s", "severity"), _schema()) is None

    def test_not_sortable(self) -> None:
        err = validate_sort_condition(SortCondition("s", "notes"), _schema())
        assert err.message == "field is not sortable"
