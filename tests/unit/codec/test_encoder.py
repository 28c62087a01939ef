"""Unit tests for encoding a SearchConfig into query parameters."""
from __future__ import annotations

import json

from structlog.testing import capture_logs

from advanced_search.codec import encode, encode_sort
from advanced_search.model import (
    FilterCondition,
    LogicalOperator,
    SearchConfig,
    SortCondition,
    create_filter_condition,
)


class TestEncode:
    def test_empty_config(self) -> None:
        assert encode(SearchConfig()) == {}

    def test_scalar_condition(self) -> None:
        config = SearchConfig(filter_conditions=(create_filter_condition("status", "eq", "PENDING"),))
        assert encode(config) == {"status[eq]": "PENDING"}

    def test_list_and_range(self) -> None:
        config = SearchConfig(filter_conditions=(
            create_filter_condition("status", "in", ("PENDING", "DONE")),
            create_filter_condition("createdAt", "between", ["2024-01-01", "2024-01-31"]),
        ))
        assert encode(config) == {
            "status[in]": ["PENDING", "DONE"],
            "createdAt[between]": ["2024-01-01", "2024-01-31"],
        }

    def test_no_value_operator_emits_true(self) -> None:
        config = SearchConfig(filter_conditions=(create_filter_condition("email", "isNull"),))
        assert encode(config) == {"email[isNull]": True}

    def test_disabled_condition_excluded(self) -> None:
        config = SearchConfig(filter_conditions=(
            create_filter_condition("title", "contains", "crash").copy_with(enabled=False),
            create_filter_condition("status", "eq", "PENDING"),
        ))
        assert encode(config) == {"status[eq]": "PENDING"}

    def test_reserved_keys(self) -> None:
        config = SearchConfig(
            global_search="login",
            sort_conditions=(SortCondition("s1", "severity", "desc"),),
            default_logical_operator=LogicalOperator.OR,
        )
        params = encode(config)
        assert params["search"] == "login"
        assert json.loads(params["sortBy"]) == [{"field": "severity", "order": "desc"}]
        assert params["operator"] == "or"

    def test_empty_search_not_emitted(self) -> None:
        assert "search" not in encode(SearchConfig(global_search=""))

    def test_badly_shaped_value_skipped(self) -> None:
        config = SearchConfig(filter_conditions=(
            create_filter_condition("status", "in", []),
            create_filter_condition("createdAt", "between", ["2024-01-01"]),
            create_filter_condition("title", "eq", None),
        ))
        with capture_logs() as logs:
            assert encode(config) == {}
        assert [e["reason"] for e in logs if e["event"] == "query_param_skipped"] == [
            "value_shape", "value_shape", "value_shape",
        ]

    def test_unknown_operator_skipped(self) -> None:
        config = SearchConfig(filter_conditions=(FilterCondition("c1", "title", "fuzzy", "x"),))
        assert encode(config) == {}

    def test_collision_last_wins_and_warns(self) -> None:
        config = SearchConfig(filter_conditions=(
            create_filter_condition("status", "eq", "PENDING"),
            create_filter_condition("status", "eq", "DONE"),
        ))
        with capture_logs() as logs:
            params = encode(config)
        assert params == {"status[eq]": "DONE"}
        warnings = [e for e in logs if e["event"] == "query_param_collision"]
        assert warnings and warnings[0]["log_level"] == "warning"
        assert warnings[0]["key"] == "status[eq]"


class TestEncodeSort:
    def test_priority_order_kept(self) -> None:
        config = SearchConfig(sort_conditions=(
            SortCondition("s1", "severity", "desc"),
            SortCondition("s2", "createdAt", "asc"),
        ))
        assert encode_sort(config) == (
            '[{"field":"severity","order":"desc"},{"field":"createdAt","order":"asc"}]'
        )
