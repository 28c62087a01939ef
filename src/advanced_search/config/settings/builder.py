"""Config settings – BuilderSettings for SearchBuilder sessions."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from advanced_search.config.errors import InvalidSettingValueError
from advanced_search.config.settings.loaders import Settings
from advanced_search.model.conditions import LogicalOperator

DUPLICATE_POLICIES = frozenset({"reject", "allow"})


@dataclasses.dataclass
class BuilderSettings(Settings):
    """Tunables of one :class:`~advanced_search.builder.SearchBuilder`.

    Environment variables use the ``ADVANCED_SEARCH_`` prefix, e.g.
    ``ADVANCED_SEARCH_MAX_CONDITIONS=20``.

    ``duplicate_policy``:
        ``reject`` keeps at most one enabled condition per ``field[operator]``
        key; ``allow`` lets later conditions overwrite earlier ones on the wire.
    """

    _prefix: ClassVar[str] = "ADVANCED_SEARCH"

    max_conditions: int = 10
    duplicate_policy: str = "reject"
    default_logical_operator: str = ""
    history_limit: int = 50

    def _validate(self) -> None:
        if self.max_conditions < 1:
            raise InvalidSettingValueError("max_conditions", self.max_conditions, "must be >= 1")
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise InvalidSettingValueError(
                "duplicate_policy", self.duplicate_policy, "unknown policy", allowed=DUPLICATE_POLICIES
            )
        if self.default_logical_operator and self.default_logical_operator not in {o.value for o in LogicalOperator}:
            raise InvalidSettingValueError(
                "default_logical_operator",
                self.default_logical_operator,
                "must be empty or a logical operator",
                allowed=[o.value for o in LogicalOperator],
            )
        if self.history_limit < 0:
            raise InvalidSettingValueError("history_limit", self.history_limit, "must be >= 0")

    @property
    def rejects_duplicates(self) -> bool:
        return self.duplicate_policy == "reject"

    @property
    def logical_operator(self) -> LogicalOperator | None:
        """The initial ``default_logical_operator``; ``None`` leaves ``operator`` off the wire."""
        return LogicalOperator(self.default_logical_operator) if self.default_logical_operator else None


__all__ = ["DUPLICATE_POLICIES", "BuilderSettings"]
