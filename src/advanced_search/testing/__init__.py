"""Testing – property-based strategies for search schemas and configurations."""
from advanced_search.testing.strategies import (
    field_schema_strategy,
    filter_condition_strategy,
    search_config_strategy,
    search_field_strategy,
    value_strategy,
)

__all__ = [
    "field_schema_strategy",
    "filter_condition_strategy",
    "search_config_strategy",
    "search_field_strategy",
    "value_strategy",
]
