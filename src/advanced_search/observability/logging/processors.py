"""Observability – get_logger helper and the value-summary processor."""
from __future__ import annotations

from typing import Any

import structlog

_MAX_VALUE_REPR = 200


def truncate_values(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that shortens oversized reprs of condition values.

    Filter values come from end users (``in`` lists, free text) and may be large.
    """
    for key, value in event_dict.items():
        if isinstance(value, (list, tuple, dict, str)):
            text = repr(value)
            if len(text) > _MAX_VALUE_REPR:
                event_dict[key] = text[: _MAX_VALUE_REPR - 3] + "..."
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "truncate_values"]
