"""Paging policy and page fetcher contracts.

This module defines the configuration consumed by the planner and the call
signatures the executor expects from page drivers.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from ...models import FetchedPage, PageRequest

DEFAULT_MAX_PAGE_SIZE = 250

# What a driver may hand back for one page: a FetchedPage, a plain
# sequence of rows, or None for a silently failed request.
PageResult = Union[FetchedPage, Sequence[Any], None]

PageFetcher = Callable[[PageRequest, int], PageResult]
AsyncPageFetcher = Callable[[PageRequest, int], Awaitable[PageResult]]


@dataclass(frozen=True)
class PagingPolicy:
    """Paging policy for a remote paged API.

    Attributes:
        max_page_size: Largest page size the API accepts (respects server
            load and rate limits)
    """

    max_page_size: int = DEFAULT_MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate paging policy configuration."""
        if isinstance(self.max_page_size, bool) or not isinstance(self.max_page_size, int):
            raise ValueError("PagingPolicy max_page_size must be an integer")
        if self.max_page_size < 1:
            raise ValueError("PagingPolicy max_page_size must be at least 1")


def coerce_page_result(result: PageResult) -> FetchedPage:
    """Normalize a driver result into a FetchedPage.

    Args:
        result: Driver result for a single page

    Returns:
        FetchedPage with the raw row count set
    """
    if result is None:
        return FetchedPage.empty()
    if isinstance(result, FetchedPage):
        return result
    rows = list(result)
    return FetchedPage(rows=rows, raw_count=len(rows))
