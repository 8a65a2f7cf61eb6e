"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class PagingError(Exception):
    """Base exception for all library errors."""

    pass


class PlanningError(PagingError):
    """Paging window cannot be planned.

    Raised for negative offsets or limits and for page sizes below one.
    Valid non-negative windows always plan successfully.
    """

    pass


class FetchError(PagingError):
    """A page request against the remote API failed.

    Drivers raise this for transport and remote failures. The executor
    suppresses it into an empty page unless the criteria raise on errors.
    """

    def __init__(
        self,
        message: str,
        page_number: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.page_number = page_number
        self.status_code = status_code


class NotFoundError(PagingError):
    """A strict single-result search found nothing."""

    def __init__(self, message: str | None = None, filters: dict[str, Any] | None = None) -> None:
        self.filters = dict(filters or {})
        if message is None:
            message = f"Couldn't find a result with {self.filters!r}"
        super().__init__(message)
