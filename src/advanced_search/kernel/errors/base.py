"""Root error class shared by schema declarations and refused builder operations."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Errors travel inside :class:`~advanced_search.kernel.types.Err` far more
    often than they are raised, so each one knows how to describe itself to a
    caller (:meth:`to_dict`) and to the log (:meth:`log_fields`).

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Values that identify what was wrong (condition id, key, limit).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        self.operation: str | None = None
        if cause is not None:
            self.__cause__ = cause

    def refused_by(self, operation: str) -> BaseError:
        """Record the builder operation that produced this error; returns ``self``."""
        self.operation = operation
        return self

    def __str__(self) -> str:
        prefix = f"{self.operation}: " if self.operation else ""
        return f"{prefix}{self.message} [{self.code}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Caller-facing payload, keyed like validation errors on the wire."""
        payload: dict[str, Any] = {
            "type": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.operation is not None:
            payload["operation"] = self.operation
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/value pairs for a structlog event."""
        fields: dict[str, Any] = {"code": self.code, "error": type(self).__name__}
        if self.operation is not None:
            fields["operation"] = self.operation
        fields.update({f"detail_{k}": v for k, v in self.detail.items()})
        return fields


__all__ = ["BaseError"]
