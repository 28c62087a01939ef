"""Kernel types – Result variants and identifier generation."""
from advanced_search.kernel.types.ids import new_condition_id
from advanced_search.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result", "new_condition_id"]
