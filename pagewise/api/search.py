"""Search operations over paged remote APIs.

These functions are the entry points for running a SearchCriteria against a
page driver. The planning itself lives on the criteria (cached per window);
the functions here iterate the plan, look up single results and expose the
cursor diagnostics.

Example:
    >>> criteria = SearchCriteria().where(user_id="u-1").offset(895).limit(44)
    >>> rows = list(iterate(criteria, fetch_users_page))
    >>> first = find_first(SearchCriteria(), fetch_users_page, email="a@b.c")
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from ..core.exceptions import NotFoundError
from ..models import PagePlan
from ..runtime.paging import AsyncPageFetcher, PageExecutor, PageFetcher
from .criteria import SearchCriteria

logger = logging.getLogger(__name__)


def iterate(criteria: SearchCriteria, page_fetcher: PageFetcher) -> Iterator[Any]:
    """Lazily stream the rows of the criteria's window.

    Args:
        criteria: Search criteria to execute
        page_fetcher: Page driver, see PageExecutor.iterate()

    Returns:
        Generator yielding the window's rows in order
    """
    return PageExecutor().iterate(criteria, page_fetcher)


def aiterate(criteria: SearchCriteria, page_fetcher: AsyncPageFetcher) -> AsyncIterator[Any]:
    """Lazily stream the rows of the criteria's window from an async driver."""
    return PageExecutor().aiterate(criteria, page_fetcher)


def find_first(
    criteria: SearchCriteria,
    page_fetcher: PageFetcher,
    *,
    strict: bool = False,
    **filters: Any,
) -> Any | None:
    """Find a single result matching the criteria and the given filters.

    The criteria are narrowed to the first element (limit 1, offset 0) and
    the filters are merged on top of the existing conjunction set.

    Args:
        criteria: Search criteria to narrow down
        page_fetcher: Page driver
        strict: Raise on fetch errors and when nothing was found
        **filters: Additional filters

    Returns:
        The first result, or None when nothing was found

    Raises:
        NotFoundError: If strict and nothing was found
        FetchError: If strict and the page fetch failed
    """
    _narrow_to_first(criteria, strict, filters)

    for row in iterate(criteria, page_fetcher):
        return row

    return _not_found(criteria, strict)


async def afind_first(
    criteria: SearchCriteria,
    page_fetcher: AsyncPageFetcher,
    *,
    strict: bool = False,
    **filters: Any,
) -> Any | None:
    """Async variant of find_first() for async page drivers."""
    _narrow_to_first(criteria, strict, filters)

    async for row in aiterate(criteria, page_fetcher):
        return row

    return _not_found(criteria, strict)


def exists(criteria: SearchCriteria, page_fetcher: PageFetcher, **filters: Any) -> bool:
    """Check whether any result matches the criteria and the given filters."""
    return find_first(criteria, page_fetcher, **filters) is not None


async def aexists(criteria: SearchCriteria, page_fetcher: AsyncPageFetcher, **filters: Any) -> bool:
    """Async variant of exists() for async page drivers."""
    return await afind_first(criteria, page_fetcher, **filters) is not None


def plan(criteria: SearchCriteria, max_page_size: int | None = None) -> PagePlan:
    """Return the (cached) page plan of the criteria."""
    return criteria.plan(max_page_size)


def current_page(criteria: SearchCriteria) -> int | None:
    """Return the page the criteria's cursor is on, without advancing it."""
    return criteria.current_page


def is_first_page(criteria: SearchCriteria) -> bool:
    """Whether the criteria's cursor is on the first planned page."""
    return criteria.is_first_page


def is_last_page(criteria: SearchCriteria) -> bool:
    """Whether the criteria's cursor is on the last planned page.

    Always False for open-ended plans.
    """
    return criteria.is_last_page


def _narrow_to_first(criteria: SearchCriteria, strict: bool, filters: dict[str, Any]) -> None:
    if strict:
        criteria.raise_on_error()
    criteria.limit(1).offset(0)
    if filters:
        criteria.where(**filters)


def _not_found(criteria: SearchCriteria, strict: bool) -> None:
    filters = criteria.settings.filters
    if strict:
        raise NotFoundError(filters=filters)
    logger.debug("No search result found", extra={"filters": filters})
    return None
