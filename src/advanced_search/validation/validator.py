"""Validator – checks conditions against the operator catalog and field schema.

:func:`validate_condition` applies, in order and stopping at the first failure:

1. the operator exists in the catalog (``invalid``);
2. the operator supports the field type (``invalid``);
3. a value-taking operator has a value that is not ``None`` or ``""`` (``required``);
4. a list operator has a non-empty list (``required``);
5. a range operator has exactly two bounds, both set (``required``).

:func:`validate_config` runs that for every *enabled* filter condition and adds
configuration-level checks (unknown field, duplicate ``field[operator]`` key,
sort condition on an unknown or unsortable field).
"""
from __future__ import annotations

from typing import Iterable, Sequence

from advanced_search.model.conditions import FilterCondition, SortCondition
from advanced_search.model.config import SearchConfig
from advanced_search.model.values import shape_value
from advanced_search.schema.fields import FieldSchema, FieldType, SearchField
from advanced_search.schema.operators import DEFAULT_CATALOG, OperatorCatalog
from advanced_search.validation.errors import SearchValidationError, ValidationErrorKind
from advanced_search.validation.rules import ConditionRule

__all__ = ["validate_condition", "validate_config", "validate_sort_condition"]


def _error(condition: FilterCondition | SortCondition, message: str, kind: ValidationErrorKind) -> SearchValidationError:
    return SearchValidationError(condition_id=condition.id, field=condition.field, message=message, kind=kind)


def validate_condition(
    condition: FilterCondition,
    field_type: FieldType | str,
    catalog: OperatorCatalog = DEFAULT_CATALOG,
) -> SearchValidationError | None:
    """Return the first problem with *condition*, or ``None`` when it is valid."""
    descriptor = catalog.describe(condition.operator)
    if descriptor is None:
        return _error(condition, "unknown operator", ValidationErrorKind.INVALID)

    if not descriptor.supports(field_type):
        type_name = getattr(field_type, "value", field_type)
        return _error(
            condition,
            f"operator '{descriptor.id}' is not supported for {type_name} fields",
            ValidationErrorKind.INVALID,
        )

    value = condition.value
    if descriptor.requires_value and (value is None or value == ""):
        return _error(condition, "this operator requires a value", ValidationErrorKind.REQUIRED)

    shaped = shape_value(descriptor, value)
    if descriptor.requires_array and shaped is None:
        return _error(condition, "this operator requires at least one value", ValidationErrorKind.REQUIRED)

    if descriptor.requires_range:
        if shaped is None:
            return _error(
                condition, "this operator requires a start and an end value", ValidationErrorKind.REQUIRED
            )
        if value[0] is None or value[1] is None:
            return _error(condition, "range start and end must both be set", ValidationErrorKind.REQUIRED)

    return None


def validate_sort_condition(sort: SortCondition, schema: FieldSchema) -> SearchValidationError | None:
    field = schema.get(sort.field)
    if field is None:
        return _error(sort, "unknown field", ValidationErrorKind.INVALID)
    if not field.sortable:
        return _error(sort, "field is not sortable", ValidationErrorKind.INVALID)
    return None


def validate_config(
    config: SearchConfig,
    schema: FieldSchema | Sequence[SearchField],
    catalog: OperatorCatalog = DEFAULT_CATALOG,
    rules: Iterable[ConditionRule] = (),
) -> list[SearchValidationError]:
    """Return every validation error in *config*; an empty list means valid.

    Disabled filter conditions are skipped entirely.  *rules* run only on
    conditions that pass the core checks.
    """
    schema = FieldSchema.coerce(schema)
    rules = tuple(rules)
    errors: list[SearchValidationError] = []
    seen_keys: set[tuple[str, str]] = set()

    for condition in config.enabled_conditions():
        field = schema.get(condition.field)
        if field is None:
            errors.append(_error(condition, "unknown field", ValidationErrorKind.INVALID))
            continue

        error = validate_condition(condition, field.type, catalog)
        if error is not None:
            errors.append(error)
            continue

        if condition.key in seen_keys:
            errors.append(_error(
                condition,
                f"another enabled condition already uses {condition.field}[{condition.operator}]",
                ValidationErrorKind.INVALID,
            ))
            continue
        seen_keys.add(condition.key)

        descriptor = catalog.describe(condition.operator)
        for rule in rules:
            rule_error = rule.check(condition, descriptor, field.type)  # type: ignore[arg-type]
            if rule_error is not None:
                errors.append(rule_error)
                break

    for sort in config.sort_conditions:
        sort_error = validate_sort_condition(sort, schema)
        if sort_error is not None:
            errors.append(sort_error)

    return errors
