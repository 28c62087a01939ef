"""Validation error records."""
from __future__ import annotations

import dataclasses
from enum import Enum

__all__ = ["SearchValidationError", "ValidationErrorKind"]


class ValidationErrorKind(str, Enum):
    REQUIRED = "required"
    INVALID = "invalid"
    FORMAT = "format"
    RANGE = "range"


@dataclasses.dataclass(frozen=True)
class SearchValidationError:
    """One problem found on one condition.

    These are returned, never raised: the caller decides whether an error list
    blocks submission.
    """
    condition_id: str
    field: str
    message: str
    kind: ValidationErrorKind

    def to_dict(self) -> dict[str, str]:
        return {
            "conditionId": self.condition_id,
            "field": self.field,
            "message": self.message,
            "type": self.kind.value,
        }
