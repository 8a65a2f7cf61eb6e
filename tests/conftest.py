"""Shared fixtures: in-memory page drivers over a reference dataset."""

from __future__ import annotations

from typing import Any

import pytest

from pagewise import FetchedPage, FetchError, PageRequest


class ListPageFetcher:
    """Page driver serving one-based pages of an in-memory list.

    Records every requested page number and optionally fails on given pages.
    """

    def __init__(
        self,
        dataset: list[Any],
        fail_pages: set[int] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.dataset = dataset
        self.fail_pages = fail_pages or set()
        self.error = error
        self.pages: list[int] = []
        self.requests: list[PageRequest] = []

    def page(self, page_number: int, per_page: int) -> list[Any]:
        start = (page_number - 1) * per_page
        return self.dataset[start : start + per_page]

    def __call__(self, request: PageRequest, page_number: int) -> FetchedPage:
        self.pages.append(page_number)
        self.requests.append(request)
        if page_number in self.fail_pages:
            raise self.error or FetchError(f"page {page_number} failed")
        rows = self.page(page_number, request.per_page)
        return FetchedPage(rows=rows, raw_count=len(rows))


class AsyncListPageFetcher(ListPageFetcher):
    """Async flavour of ListPageFetcher."""

    async def __call__(self, request: PageRequest, page_number: int) -> FetchedPage:
        return ListPageFetcher.__call__(self, request, page_number)


@pytest.fixture
def list_fetcher():
    """Factory for synchronous in-memory page drivers."""
    return ListPageFetcher


@pytest.fixture
def async_list_fetcher():
    """Factory for asynchronous in-memory page drivers."""
    return AsyncListPageFetcher
