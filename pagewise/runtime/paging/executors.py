"""Page execution logic for streaming planned pages.

This module provides the PageExecutor class that walks a criteria's page
plan, fetches one page at a time through an injected driver, crops the
unaligned boundary pages and yields the rows of the window.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from time import perf_counter
from typing import TYPE_CHECKING, Any

from ...core.exceptions import FetchError
from ...models import FetchedPage, PagePlan
from .cursor import PageCursor
from .definitions import AsyncPageFetcher, PageFetcher, coerce_page_result
from .telemetry import log_iteration_complete, log_page_fetch_error, log_page_fetched

if TYPE_CHECKING:
    from ...api.criteria import SearchCriteria


class PageExecutor:
    """Executes page plans and streams the rows of the window.

    Iteration is pull-based: a page is only requested when the consumer asks
    for more rows than the previous pages provided. Every call starts over at
    the first planned page, moving the criteria's shared cursor along.

    Iteration stops when the planned range is exhausted or when a page comes
    back short (fewer raw rows than the page size), since the remote data
    ended before the planned last page.
    """

    def iterate(self, criteria: SearchCriteria, page_fetcher: PageFetcher) -> Iterator[Any]:
        """Stream the rows of the criteria's window.

        Args:
            criteria: Search criteria to execute
            page_fetcher: Callable taking a PageRequest and the page number,
                returning a FetchedPage, a sequence of rows or None

        Yields:
            Rows of the window, in order

        Raises:
            FetchError: If a page fetch fails and the criteria raise on errors
        """
        plan = criteria.plan()
        cursor = criteria.cursor
        raise_on_error = criteria.settings.raise_on_error
        cursor.rewind()

        pages_fetched = 0
        rows_yielded = 0
        short_page = False
        started = perf_counter()

        page_number = cursor.peek()
        while page_number is not None:
            request = criteria.page_request(page_number)
            fetch_start = perf_counter()
            try:
                page = coerce_page_result(page_fetcher(request, page_number))
            except FetchError as e:
                page = self._handle_fetch_error(e, page_number, raise_on_error)
            except Exception as e:
                log_page_fetch_error(
                    page_number=page_number,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    suppressed=False,
                )
                raise
            pages_fetched += 1

            rows = self._window_rows(plan, cursor, page)
            log_page_fetched(
                page_number=page_number,
                raw_count=page.raw_count,
                rows_yielded=len(rows),
                latency_ms=(perf_counter() - fetch_start) * 1000.0,
            )

            for row in rows:
                rows_yielded += 1
                yield row

            if page.raw_count < plan.page_size:
                short_page = True
                break

            page_number = cursor.advance()

        log_iteration_complete(
            pages_fetched=pages_fetched,
            rows_yielded=rows_yielded,
            short_page=short_page,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

    async def aiterate(
        self, criteria: SearchCriteria, page_fetcher: AsyncPageFetcher
    ) -> AsyncIterator[Any]:
        """Stream the rows of the criteria's window from an async driver.

        Same semantics as ``iterate()``; the driver call is awaited.

        Args:
            criteria: Search criteria to execute
            page_fetcher: Async callable taking a PageRequest and the page
                number, returning a FetchedPage, a sequence of rows or None

        Yields:
            Rows of the window, in order

        Raises:
            FetchError: If a page fetch fails and the criteria raise on errors
        """
        plan = criteria.plan()
        cursor = criteria.cursor
        raise_on_error = criteria.settings.raise_on_error
        cursor.rewind()

        pages_fetched = 0
        rows_yielded = 0
        short_page = False
        started = perf_counter()

        page_number = cursor.peek()
        while page_number is not None:
            request = criteria.page_request(page_number)
            fetch_start = perf_counter()
            try:
                page = coerce_page_result(await page_fetcher(request, page_number))
            except FetchError as e:
                page = self._handle_fetch_error(e, page_number, raise_on_error)
            except Exception as e:
                log_page_fetch_error(
                    page_number=page_number,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    suppressed=False,
                )
                raise
            pages_fetched += 1

            rows = self._window_rows(plan, cursor, page)
            log_page_fetched(
                page_number=page_number,
                raw_count=page.raw_count,
                rows_yielded=len(rows),
                latency_ms=(perf_counter() - fetch_start) * 1000.0,
            )

            for row in rows:
                rows_yielded += 1
                yield row

            if page.raw_count < plan.page_size:
                short_page = True
                break

            page_number = cursor.advance()

        log_iteration_complete(
            pages_fetched=pages_fetched,
            rows_yielded=rows_yielded,
            short_page=short_page,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

    def _handle_fetch_error(
        self, error: FetchError, page_number: int, raise_on_error: bool
    ) -> FetchedPage:
        """Propagate a fetch error, or swallow it into an empty page.

        An empty page is short, so a swallowed error also ends the iteration.
        """
        log_page_fetch_error(
            page_number=page_number,
            error_type=type(error).__name__,
            error_message=str(error),
            suppressed=not raise_on_error,
        )
        if raise_on_error:
            if error.page_number is None:
                error.page_number = page_number
            raise error
        return FetchedPage.empty()

    def _window_rows(self, plan: PagePlan, cursor: PageCursor, page: FetchedPage) -> list[Any]:
        """Crop the rows of a raw page to the window.

        Both bounds refer to the raw page, so a single planned page may be
        cropped at both ends at once.
        """
        start = 0
        stop = None
        if cursor.on_first_page and plan.first_page_unaligned:
            start = plan.relative_first_page_slice.start
        if cursor.on_last_page and plan.last_page_unaligned:
            stop = plan.relative_last_page_slice.stop
        return page.rows[start:stop]
