"""Observability – structured logging helpers."""
from advanced_search.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
