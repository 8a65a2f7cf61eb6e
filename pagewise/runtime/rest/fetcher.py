"""REST page driver using search specs and an HTTP client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp

from ...core.exceptions import FetchError
from ...models import FetchedPage, PageRequest
from ...utils.http import HTTPClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestSearchSpec:
    id: str
    path: str
    # Response key holding the rows; None when the body is the row list
    elements_key: str | None = None
    page_param: str = "page"
    per_page_param: str = "per_page"
    sort_param: str | None = "sort"
    build_headers: Callable[[PageRequest], dict[str, str]] | None = None


def encode_param(value: Any) -> str:
    """Encode a filter value as a query parameter string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_param(item) for item in value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class RestPageFetcher:
    """Async page fetcher for Grape-style ``page``/``per_page`` search endpoints.

    Instances are awaitable page drivers for ``PageExecutor.aiterate()``.
    Transport failures, HTTP error statuses and malformed bodies are raised as
    FetchError, so the criteria's error strictness decides what happens next.
    """

    def __init__(self, client: HTTPClient, spec: RestSearchSpec) -> None:
        self._client = client
        self._spec = spec

    @property
    def spec(self) -> RestSearchSpec:
        return self._spec

    def build_query(self, request: PageRequest) -> dict[str, str]:
        """Convert a page request into query parameters."""
        query = {
            key: encode_param(value) for key, value in request.filters.items() if value is not None
        }
        if self._spec.sort_param and request.sort is not None:
            query[self._spec.sort_param] = encode_param(request.sort)
        query[self._spec.page_param] = str(request.page)
        query[self._spec.per_page_param] = str(request.per_page)
        return query

    async def __call__(self, request: PageRequest, page_number: int) -> FetchedPage:
        query = self.build_query(request)
        headers = self._spec.build_headers(request) if self._spec.build_headers else None

        logger.debug(
            "Requesting search page",
            extra={"search": self._spec.id, "page_number": page_number, "query": query},
        )

        try:
            body = await self._client.get(self._spec.path, params=query, headers=headers)
        except aiohttp.ClientResponseError as e:
            raise FetchError(
                f"{self._spec.id} search failed on page {page_number}: {e.status} {e.message}",
                page_number=page_number,
                status_code=e.status,
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchError(
                f"{self._spec.id} search failed on page {page_number}: {e!r}",
                page_number=page_number,
            ) from e

        rows = self.extract_rows(body, page_number)
        return FetchedPage(rows=rows, raw_count=len(rows))

    def extract_rows(self, body: Any, page_number: int) -> list[Any]:
        """Pull the page rows out of a decoded response body.

        Raises:
            FetchError: If the body does not hold a row list
        """
        rows = body
        if self._spec.elements_key is not None:
            if not isinstance(body, dict) or self._spec.elements_key not in body:
                raise FetchError(
                    f"{self._spec.id} response has no {self._spec.elements_key!r} key",
                    page_number=page_number,
                )
            rows = body[self._spec.elements_key]

        if not isinstance(rows, list):
            raise FetchError(
                f"{self._spec.id} response rows are {type(rows).__name__}, expected list",
                page_number=page_number,
            )
        return rows
