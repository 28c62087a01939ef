"""Errors raised while building or loading :class:`BuilderSettings`.

Unlike refused builder operations these are raised: a session cannot start
with settings that do not hold together.  ``detail`` names the environment
variable (or dataclass field) and, where the choice is closed, the values
that would have been accepted.
"""
from __future__ import annotations

from typing import Any, Iterable

from advanced_search.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or fail their own checks."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, field: str | None = None) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name, "field": field or setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: Any,
        reason: str,
        *,
        allowed: Iterable[str] | None = None,
    ) -> None:
        detail: dict[str, Any] = {"setting": setting_name, "value": value, "reason": reason}
        if allowed is not None:
            detail["allowed"] = sorted(allowed)
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}", detail=detail)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
