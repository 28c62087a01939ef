"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── InvariantViolationError
    ├── SchemaError
    ├── SearchError              (refused builder operations)
    │   ├── ConditionNotFoundError
    │   ├── DuplicateConditionError
    │   ├── ConditionLimitError
    │   ├── InvalidUpdateError
    │   └── InvalidValueError
    └── ConfigError              (advanced_search.config.errors)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from advanced_search.kernel.errors.base import BaseError
from advanced_search.kernel.errors.domain import (
    ConditionLimitError,
    ConditionNotFoundError,
    DuplicateConditionError,
    InvalidUpdateError,
    InvalidValueError,
    InvariantViolationError,
    SchemaError,
    SearchError,
)

__all__ = [
    "BaseError",
    "ConditionLimitError",
    "ConditionNotFoundError",
    "DuplicateConditionError",
    "InvalidUpdateError",
    "InvalidValueError",
    "InvariantViolationError",
    "SchemaError",
    "SearchError",
]
