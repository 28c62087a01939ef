"""Engine – one page of matches plus the configuration that produced it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from advanced_search.codec import QueryParams, encode
from advanced_search.model.config import SearchConfig

T = TypeVar("T")

__all__ = ["SearchResult"]


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """A page of *items* out of *total* matches.

    ``config`` is the configuration the engine evaluated and
    ``applied_condition_ids`` lists the enabled filter conditions that took
    part, in evaluation order.  Pages are 1-based.
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    config: SearchConfig = field(default_factory=SearchConfig)
    applied_condition_ids: tuple[str, ...] = ()
    took_ms: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total // self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def is_filtered(self) -> bool:
        return bool(self.applied_condition_ids or self.config.global_search.strip())

    def query_params(self) -> QueryParams:
        """The wire form of ``config``, e.g. for building next/previous page links."""
        return encode(self.config)
