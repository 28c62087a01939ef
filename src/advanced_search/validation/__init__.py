"""Validation – per-condition and per-configuration checks."""
from advanced_search.validation.errors import SearchValidationError, ValidationErrorKind
from advanced_search.validation.rules import ConditionRule, RangeOrderRule, RegexPatternRule
from advanced_search.validation.validator import (
    validate_condition,
    validate_config,
    validate_sort_condition,
)

__all__ = [
    "ConditionRule",
    "RangeOrderRule",
    "RegexPatternRule",
    "SearchValidationError",
    "ValidationErrorKind",
    "validate_condition",
    "validate_config",
    "validate_sort_condition",
]
