"""Search criteria with a chainable filter interface.

The criteria hold the query intent of a paged search: a conjunction of
filters, an offset/limit window, an opaque sort spec and the error
strictness. They also own the page plan cache and the page cursor, so the
plan is computed once per window and the cursor reflects the progress of the
latest iteration.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import PlanningError
from ..models import PagePlan, PageRequest
from ..runtime.paging.cursor import PageCursor
from ..runtime.paging.definitions import PageFetcher, PagingPolicy
from ..runtime.paging.executors import PageExecutor
from ..runtime.paging.planners import PagePlanner, validate_window


class CriteriaSettings(BaseModel):
    """Snapshot of all criteria settings."""

    filters: dict[str, Any] = Field(default_factory=dict)
    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    sort: Any = None
    raise_on_error: bool = False

    model_config = ConfigDict(frozen=True)


class SearchCriteria:
    """Chainable criteria for a paged remote search.

    Example:
        >>> criteria = SearchCriteria().where(user_id="u-1").offset(20).limit(10)
        >>> criteria.plan().page_range
        range(1, 2)
    """

    def __init__(
        self,
        policy: PagingPolicy | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        """Initialize search criteria.

        Args:
            policy: Paging policy of the remote API (defaults to PagingPolicy())
            fetcher: Optional page fetcher used when iterating the criteria
        """
        self._planner = PagePlanner(policy)
        self._fetcher = fetcher
        self._filters: dict[str, Any] = {}
        self._limit = 0
        self._offset = 0
        self._sort: Any = None
        self._raise_on_error = False
        self._plans: dict[int, PagePlan] = {}
        self._cursor: PageCursor | None = None

    @property
    def policy(self) -> PagingPolicy:
        return self._planner.policy

    @property
    def max_page_size(self) -> int:
        return self._planner.max_page_size

    @property
    def fetcher(self) -> PageFetcher | None:
        return self._fetcher

    @property
    def settings(self) -> CriteriaSettings:
        """Current settings as an immutable snapshot."""
        return CriteriaSettings(
            filters=dict(self._filters),
            limit=self._limit,
            offset=self._offset,
            sort=self._sort,
            raise_on_error=self._raise_on_error,
        )

    def all(self) -> SearchCriteria:
        """Reset every setting to its default.

        Returns:
            The criteria instance for chaining
        """
        self._filters = {}
        self._limit = 0
        self._offset = 0
        self._sort = None
        self._raise_on_error = False
        self._invalidate()
        return self

    def where(self, **filters: Any) -> SearchCriteria:
        """Merge filters into the conjunction set.

        Args:
            **filters: Filters to add; existing keys are overwritten

        Returns:
            The criteria instance for chaining
        """
        self._filters.update(filters)
        return self

    def limit(self, count: int) -> SearchCriteria:
        """Set the number of elements to take (0 = unbounded).

        Raises:
            PlanningError: If count is negative
        """
        validate_window(self._offset, count)
        self._limit = count
        self._invalidate()
        return self

    def offset(self, count: int) -> SearchCriteria:
        """Set the number of leading elements to skip.

        Raises:
            PlanningError: If count is negative
        """
        validate_window(count, self._limit)
        self._offset = count
        self._invalidate()
        return self

    def sort(self, spec: Any) -> SearchCriteria:
        """Set the sort spec passed through to the page driver."""
        self._sort = spec
        return self

    def raise_on_error(self, flag: bool = True) -> SearchCriteria:
        """Make page fetch errors propagate instead of yielding empty pages.

        By default fetch errors are swallowed, so a failing page simply ends
        the iteration.
        """
        self._raise_on_error = bool(flag)
        return self

    def plan(self, max_page_size: int | None = None) -> PagePlan:
        """Return the page plan for the current window.

        Plans are cached per page size until the offset or limit change.

        Args:
            max_page_size: Page size ceiling (defaults to the policy's)

        Returns:
            The page plan

        Raises:
            PlanningError: If max_page_size is below one
        """
        size = self.max_page_size if max_page_size is None else max_page_size
        plan = self._plans.get(size)
        if plan is None:
            plan = self._planner_for(size).plan(offset=self._offset, limit=self._limit)
            self._plans[size] = plan
        return plan

    @property
    def cursor(self) -> PageCursor:
        """The page cursor of this criteria (same instance until the window changes)."""
        if self._cursor is None:
            self._cursor = PageCursor(self.plan())
        return self._cursor

    @property
    def current_page(self) -> int | None:
        return self.cursor.peek()

    @property
    def is_first_page(self) -> bool:
        return self.cursor.on_first_page

    @property
    def is_last_page(self) -> bool:
        return self.cursor.on_last_page

    def page_request(self, page_number: int) -> PageRequest:
        """Build the driver snapshot for a page of the current plan."""
        return PageRequest(
            filters=dict(self._filters),
            sort=self._sort,
            page=page_number,
            per_page=self.plan().page_size,
        )

    def __iter__(self) -> Iterator[Any]:
        if self._fetcher is None:
            raise TypeError("SearchCriteria has no page fetcher bound; use iterate()")
        return PageExecutor().iterate(self, self._fetcher)

    def __repr__(self) -> str:
        plan = self.plan()
        last = "inf" if plan.last_page.page_number is None else plan.last_page.page_number
        return (
            f"<{type(self).__name__} filters={self._filters}, offset={self._offset}, "
            f"limit={self._limit}, pages={plan.first_page.page_number}..{last}, "
            f"per_page={plan.page_size}, slice={plan.result_span}>"
        )

    def _planner_for(self, max_page_size: int) -> PagePlanner:
        if max_page_size == self.max_page_size:
            return self._planner
        try:
            return PagePlanner(PagingPolicy(max_page_size=max_page_size))
        except ValueError as e:
            raise PlanningError(str(e)) from e

    def _invalidate(self) -> None:
        self._plans.clear()
        self._cursor = None
