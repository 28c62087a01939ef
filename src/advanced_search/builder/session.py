"""SearchBuilder – one editing session over a single SearchConfig.

Every mutation goes through :meth:`SearchBuilder.dispatch`, which reduces the
operation, replaces the whole configuration and synchronously calls the
``on_change`` callback with the new value.  Operations the builder refuses
(unknown id, duplicate ``field[operator]`` key, condition limit, bad update
keys, an order or combinator outside its enum, a malformed sort entry) return
:class:`~advanced_search.kernel.types.Err` and leave the configuration and the
callback untouched.  No builder method raises on bad input.

The builder has exactly one logical owner; it does no locking.

Example::

    builder = SearchBuilder(fields, on_change=print)
    builder.add_condition("status", "eq", "PENDING")
    builder.add_sort("createdAt", "desc")
    builder.to_query_string()   # 'sortBy=...&status%5Beq%5D=PENDING'
"""
from __future__ import annotations

import collections
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

from advanced_search.builder.operations import (
    UPDATABLE_CONDITION_FIELDS,
    UPDATABLE_SORT_FIELDS,
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
from advanced_search.codec import QueryParams, decode, encode, parse_query_string, to_query_string
from advanced_search.config.settings import BuilderSettings
from advanced_search.kernel.errors import (
    ConditionLimitError,
    ConditionNotFoundError,
    DuplicateConditionError,
    InvalidUpdateError,
    InvalidValueError,
    SearchError,
)
from advanced_search.kernel.types import Err, Ok, Result, new_condition_id
from advanced_search.model.conditions import (
    FilterCondition,
    LogicalOperator,
    SortCondition,
    SortOrder,
    create_filter_condition,
    create_sort_condition,
)
from advanced_search.model.config import SearchConfig
from advanced_search.observability.logging import get_logger
from advanced_search.schema.fields import FieldSchema, SearchField
from advanced_search.schema.operators import DEFAULT_CATALOG, OperatorCatalog
from advanced_search.validation import ConditionRule, SearchValidationError, validate_config

__all__ = ["SearchBuilder", "SortSpec"]

_log = get_logger(__name__)

ChangeCallback = Callable[[SearchConfig], None]
SortSpec = SortCondition | tuple[str, str] | Mapping[str, str] | str


class SearchBuilder:
    """CRUD-style session over one :class:`SearchConfig`.

    Args:
        fields: The field schema; fixed for the lifetime of the builder.
        initial_config: A full config, or a mapping of config fields merged over
            the default one.  :meth:`reset` returns here.
        on_change: Called with the new config after every mutation.
        catalog: Operator catalog used for validation and encoding.
        settings: Limits and the duplicate-key policy.
        rules: Extra validation rules run by :meth:`validate`.
    """

    def __init__(
        self,
        fields: FieldSchema | Sequence[SearchField],
        *,
        initial_config: SearchConfig | Mapping[str, Any] | None = None,
        on_change: ChangeCallback | None = None,
        catalog: OperatorCatalog = DEFAULT_CATALOG,
        settings: BuilderSettings | None = None,
        rules: Iterable[ConditionRule] = (),
    ) -> None:
        self._schema = FieldSchema.coerce(fields)
        self._catalog = catalog
        self._settings = settings or BuilderSettings()
        self._rules = tuple(rules)
        self._on_change = on_change

        if isinstance(initial_config, SearchConfig):
            initial = initial_config
        else:
            initial = SearchConfig(default_logical_operator=self._settings.logical_operator)
            if initial_config:
                initial = initial.copy_with(**initial_config)
        self._initial = initial
        self._config = initial
        self._errors: list[SearchValidationError] = []
        self._history: collections.deque[SearchConfig] = collections.deque(
            maxlen=self._settings.history_limit
        )

    @classmethod
    def from_query_params(
        cls,
        fields: FieldSchema | Sequence[SearchField],
        params: Mapping[str, Any],
        **kwargs: Any,
    ) -> "SearchBuilder":
        """Start a session from previously serialized parameters (e.g. a URL)."""
        catalog = kwargs.get("catalog", DEFAULT_CATALOG)
        settings = kwargs.get("settings") or BuilderSettings()
        base = SearchConfig(default_logical_operator=settings.logical_operator)
        kwargs["initial_config"] = base.copy_with(**decode(params, catalog))
        return cls(fields, **kwargs)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    @property
    def catalog(self) -> OperatorCatalog:
        return self._catalog

    @property
    def settings(self) -> BuilderSettings:
        return self._settings

    @property
    def errors(self) -> list[SearchValidationError]:
        """Errors from the last :meth:`validate` call."""
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def to_query_params(self) -> QueryParams:
        return encode(self._config, self._catalog)

    def to_query_string(self) -> str:
        return to_query_string(self.to_query_params())

    def validate(self, fields: FieldSchema | Sequence[SearchField] | None = None) -> list[SearchValidationError]:
        """Validate the current config and remember the result in :attr:`errors`."""
        schema = self._schema if fields is None else FieldSchema.coerce(fields)
        self._errors = validate_config(self._config, schema, self._catalog, self._rules)
        return list(self._errors)

    # ------------------------------------------------------------------
    # Mutation path
    # ------------------------------------------------------------------

    def dispatch(self, operation: Operation) -> SearchConfig:
        """Apply *operation*, store the new config and notify the listener."""
        previous = self._config
        self._config = reduce(previous, operation)
        if self._history.maxlen:
            self._history.append(previous)
        _log.debug(
            "search_config_changed",
            operation=type(operation).__name__,
            conditions=len(self._config.filter_conditions),
            sorts=len(self._config.sort_conditions),
        )
        if self._on_change is not None:
            self._on_change(self._config)
        return self._config

    def _refuse(self, operation: str, error: SearchError) -> Err[SearchError]:
        error.refused_by(operation)
        _log.info("search_operation_refused", **error.log_fields())
        return Err(error)

    def _collides(self, field: str, operator: str, *, ignore_id: str | None = None) -> bool:
        if not self._settings.rejects_duplicates:
            return False
        return any(
            c.enabled and c.key == (field, operator) and c.id != ignore_id
            for c in self._config.filter_conditions
        )

    def _at_limit(self) -> bool:
        return len(self._config.filter_conditions) >= self._settings.max_conditions

    # ------------------------------------------------------------------
    # Filter conditions
    # ------------------------------------------------------------------

    def add_condition(
        self, field: str, operator: str | None = None, value: Any = None
    ) -> Result[FilterCondition, SearchError]:
        """Append a new enabled condition.

        When *operator* is omitted the default operator for the field's type is
        used.
        """
        if operator is None:
            field_type = self._schema.type_of(field)
            descriptor = self._catalog.default_operator_for(field_type) if field_type else None
            if descriptor is None:
                return self._refuse("add_condition", SearchError(
                    f"No default operator for field '{field}'", detail={"field": field}
                ))
            operator = descriptor.id
        operator = str(getattr(operator, "value", operator))

        if self._at_limit():
            return self._refuse("add_condition", ConditionLimitError(self._settings.max_conditions))
        if self._collides(field, operator):
            return self._refuse("add_condition", DuplicateConditionError(field, operator))

        condition = create_filter_condition(field, operator, value)
        self.dispatch(AddCondition(condition))
        return Ok(condition)

    def update_condition(
        self, condition_id: str, updates: Mapping[str, Any] | None = None, **changes: Any
    ) -> Result[SearchConfig, SearchError]:
        """Replace some attributes of one condition (``field``, ``operator``,
        ``value``, ``logical_operator``, ``enabled``)."""
        merged = {**(updates or {}), **changes}
        unknown = [k for k in merged if k not in UPDATABLE_CONDITION_FIELDS]
        if unknown:
            return self._refuse("update_condition", InvalidUpdateError(unknown))
        current = self._config.find_condition(condition_id)
        if current is None:
            return self._refuse("update_condition", ConditionNotFoundError(condition_id))
        if "logical_operator" in merged:
            coerced = _coerce(LogicalOperator, "logical_operator", merged["logical_operator"])
            if coerced.is_err():
                return self._refuse("update_condition", coerced.unwrap_err())
            merged["logical_operator"] = coerced.unwrap()

        updated = current.copy_with(**merged)
        if updated.enabled and self._collides(updated.field, updated.operator, ignore_id=condition_id):
            return self._refuse("update_condition", DuplicateConditionError(updated.field, updated.operator))

        return Ok(self.dispatch(UpdateCondition(condition_id, merged)))

    def remove_condition(self, condition_id: str) -> SearchConfig:
        return self.dispatch(RemoveCondition(condition_id))

    def move_condition(self, from_index: int, to_index: int) -> SearchConfig:
        """Move one filter condition; indices outside the list leave it unchanged."""
        return self.dispatch(MoveCondition(from_index, to_index))

    def toggle_condition(self, condition_id: str) -> Result[SearchConfig, SearchError]:
        current = self._config.find_condition(condition_id)
        if current is None:
            return self._refuse("toggle_condition", ConditionNotFoundError(condition_id))
        if not current.enabled and self._collides(current.field, current.operator, ignore_id=condition_id):
            return self._refuse("toggle_condition", DuplicateConditionError(current.field, current.operator))
        return Ok(self.dispatch(ToggleCondition(condition_id)))

    def duplicate_condition(self, condition_id: str) -> Result[FilterCondition, SearchError]:
        """Append a copy of a condition under a new id.

        Under the ``reject`` policy the copy starts disabled whenever enabling it
        would repeat an enabled ``field[operator]`` key.
        """
        source = self._config.find_condition(condition_id)
        if source is None:
            return self._refuse("duplicate_condition", ConditionNotFoundError(condition_id))
        if self._at_limit():
            return self._refuse("duplicate_condition", ConditionLimitError(self._settings.max_conditions))

        new_id = new_condition_id()
        enabled = not self._collides(source.field, source.operator)
        config = self.dispatch(DuplicateCondition(condition_id, new_id, enabled))
        return Ok(config.filter_conditions[-1])

    def clear_conditions(self) -> SearchConfig:
        return self.dispatch(ClearConditions())

    # ------------------------------------------------------------------
    # Free text and combinator
    # ------------------------------------------------------------------

    def set_global_search(self, text: str) -> SearchConfig:
        return self.dispatch(SetGlobalSearch(text or ""))

    def set_default_logical_operator(
        self, operator: LogicalOperator | str | None
    ) -> Result[SearchConfig, SearchError]:
        """Set the combinator sent as ``operator``; ``None`` clears it."""
        if operator is None:
            return Ok(self.dispatch(SetDefaultLogicalOperator(None)))
        coerced = _coerce(LogicalOperator, "logical_operator", operator)
        if coerced.is_err():
            return self._refuse("set_default_logical_operator", coerced.unwrap_err())
        return Ok(self.dispatch(SetDefaultLogicalOperator(coerced.unwrap())))

    # ------------------------------------------------------------------
    # Sort conditions
    # ------------------------------------------------------------------

    def add_sort(self, field: str, order: SortOrder | str = SortOrder.ASC) -> Result[SortCondition, SearchError]:
        """Append a lower-priority sort key; a field can appear only once."""
        coerced = _coerce(SortOrder, "order", order)
        if coerced.is_err():
            return self._refuse("add_sort", coerced.unwrap_err())
        if any(s.field == field for s in self._config.sort_conditions):
            return self._refuse("add_sort", DuplicateConditionError(field, "sort"))
        sort = create_sort_condition(field, coerced.unwrap())
        self.dispatch(AddSort(sort))
        return Ok(sort)

    def update_sort(
        self, sort_id: str, updates: Mapping[str, Any] | None = None, **changes: Any
    ) -> Result[SearchConfig, SearchError]:
        merged = {**(updates or {}), **changes}
        unknown = [k for k in merged if k not in UPDATABLE_SORT_FIELDS]
        if unknown:
            return self._refuse("update_sort", InvalidUpdateError(unknown))
        if self._config.find_sort(sort_id) is None:
            return self._refuse("update_sort", ConditionNotFoundError(sort_id))
        if "order" in merged:
            coerced = _coerce(SortOrder, "order", merged["order"])
            if coerced.is_err():
                return self._refuse("update_sort", coerced.unwrap_err())
            merged["order"] = coerced.unwrap()
        new_field = merged.get("field")
        if new_field is not None and any(
            s.field == new_field and s.id != sort_id for s in self._config.sort_conditions
        ):
            return self._refuse("update_sort", DuplicateConditionError(new_field, "sort"))
        return Ok(self.dispatch(UpdateSort(sort_id, merged)))

    def remove_sort(self, sort_id: str) -> SearchConfig:
        return self.dispatch(RemoveSort(sort_id))

    def move_sort(self, from_index: int, to_index: int) -> SearchConfig:
        return self.dispatch(MoveSort(from_index, to_index))

    def toggle_sort_order(self, sort_id: str) -> SearchConfig:
        return self.dispatch(ToggleSortOrder(sort_id))

    def set_sorting(self, sorts: Iterable[SortSpec]) -> Result[SearchConfig, SearchError]:
        """Replace the whole sort list, primary key first.

        Entries may be :class:`SortCondition` objects, ``(field, order)`` pairs,
        ``{"field": ..., "order": ...}`` mappings or bare field names (ascending).
        One malformed entry refuses the whole list.
        """
        converted: list[SortCondition] = []
        for spec in sorts:
            result = _to_sort(spec)
            if result.is_err():
                return self._refuse("set_sorting", result.unwrap_err())
            converted.append(result.unwrap())
        return Ok(self.dispatch(SetSorting(tuple(converted))))

    def clear_sorting(self) -> SearchConfig:
        return self.dispatch(ClearSorting())

    # ------------------------------------------------------------------
    # Import, reset, undo
    # ------------------------------------------------------------------

    def import_from_query_params(self, params: Mapping[str, Any]) -> SearchConfig:
        """Decode *params* and merge the decoded fields over the current config."""
        return self.dispatch(ApplyDecoded(decode(params, self._catalog)))

    def import_from_query_string(self, query: str) -> SearchConfig:
        return self.import_from_query_params(parse_query_string(query, self._catalog))

    def reset(self) -> SearchConfig:
        """Return to the initial config and forget validation errors."""
        self._errors = []
        return self.dispatch(ReplaceConfig(self._initial))

    def undo(self) -> SearchConfig:
        """Restore the config that preceded the last mutation, if any."""
        if not self._history:
            return self._config
        self._config = self._history.pop()
        _log.debug("search_config_restored", conditions=len(self._config.filter_conditions))
        if self._on_change is not None:
            self._on_change(self._config)
        return self._config


def _coerce(enum_type: type[Enum], name: str, raw: Any) -> Result[Any, SearchError]:
    try:
        return Ok(enum_type(raw))
    except (ValueError, TypeError):
        return Err(InvalidValueError(name, raw, [m.value for m in enum_type]))


def _to_sort(spec: Any) -> Result[SortCondition, SearchError]:
    if isinstance(spec, SortCondition):
        return Ok(spec)
    if isinstance(spec, str):
        field, order = spec, SortOrder.ASC
    elif isinstance(spec, Mapping):
        field, order = spec.get("field"), spec.get("order", SortOrder.ASC)
    elif isinstance(spec, (tuple, list)) and len(spec) == 2:  # noqa: PLR2004
        field, order = spec
    else:
        return Err(InvalidValueError("sort", spec))
    if not isinstance(field, str) or not field:
        return Err(InvalidValueError("sort field", field))
    return _coerce(SortOrder, "order", order).map(lambda o: create_sort_condition(field, o))
