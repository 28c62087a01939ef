"""Observability – structured logging helpers."""
from advanced_search.observability.logging.factory import JsonLoggerFactory
from advanced_search.observability.logging.processors import get_logger, truncate_values

__all__ = ["JsonLoggerFactory", "get_logger", "truncate_values"]
