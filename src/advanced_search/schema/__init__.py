"""Field schema and operator catalog – static, injected configuration."""
from advanced_search.schema.fields import FieldOption, FieldSchema, FieldType, SearchField
from advanced_search.schema.operators import (
    DEFAULT_CATALOG,
    OperatorCatalog,
    OperatorDescriptor,
    OperatorId,
    ValueShape,
)

__all__ = [
    "DEFAULT_CATALOG",
    "FieldOption",
    "FieldSchema",
    "FieldType",
    "OperatorCatalog",
    "OperatorDescriptor",
    "OperatorId",
    "SearchField",
    "ValueShape",
]
