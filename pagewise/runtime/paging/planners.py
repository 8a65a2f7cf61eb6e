"""Page planning logic for offset/limit windows.

This module provides the PagePlanner class that maps an arbitrary
``[offset, offset + limit)`` window onto uniformly sized, numbered pages of
a remote API. The resulting plan looks like this:

    #   [P1][P2][P3][P4]
    #    ..[xx][xx][xx]..

Only pages touching the window are requested. The first and last of them may
be unaligned with the window, in which case the plan carries the slices that
crop the surplus elements.
"""

from __future__ import annotations

from ...core.exceptions import PlanningError
from ...models import FirstPage, LastPage, PagePlan
from .definitions import PagingPolicy
from .telemetry import log_page_plan


def validate_window(offset: int, limit: int) -> None:
    """Ensure an offset/limit pair can be planned.

    Args:
        offset: Number of leading elements to skip
        limit: Number of elements to take (0 = unbounded)

    Raises:
        PlanningError: If either value is not a non-negative integer
    """
    for name, value in (("offset", offset), ("limit", limit)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise PlanningError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise PlanningError(f"{name} must not be negative, got {value}")


class PagePlanner:
    """Plans the page requests for an offset/limit window.

    The planner is a pure function of ``(offset, limit, max_page_size)``.
    Bigger pages mean fewer requests, which is the top priority, so the page
    size is chosen first and the page boundaries follow from it.
    """

    def __init__(self, policy: PagingPolicy | None = None) -> None:
        """Initialize page planner.

        Args:
            policy: Paging policy of the remote API (defaults to PagingPolicy())
        """
        self._policy = policy or PagingPolicy()

    @property
    def policy(self) -> PagingPolicy:
        return self._policy

    @property
    def max_page_size(self) -> int:
        return self._policy.max_page_size

    def plan(self, *, offset: int = 0, limit: int = 0) -> PagePlan:
        """Plan the pages for a window.

        Args:
            offset: Number of leading elements to skip
            limit: Number of elements to take (0 = unbounded)

        Returns:
            The page plan

        Raises:
            PlanningError: If offset or limit are negative
        """
        validate_window(offset, limit)

        page_size = self.page_size(offset=offset, limit=limit)
        first_page = self._first_page(offset=offset, page_size=page_size)
        last_page = self._last_page(
            offset=offset, limit=limit, page_size=page_size, first_page=first_page
        )

        plan = PagePlan(
            offset=offset,
            limit=limit,
            page_size=page_size,
            first_page=first_page,
            last_page=last_page,
        )

        log_page_plan(plan=plan, max_page_size=self.max_page_size)

        return plan

    def page_size(self, *, offset: int, limit: int) -> int:
        """Choose the page size for a window.

        Unbounded or oversized windows use the largest allowed page. Windows
        which fit into one page starting at element zero are packed into a
        single request. Everything else pages by the limit itself.

        Args:
            offset: Number of leading elements to skip
            limit: Number of elements to take (0 = unbounded)

        Returns:
            Page size between 1 and max_page_size
        """
        if limit == 0 or limit > self.max_page_size:
            return self.max_page_size
        if limit > 1 and offset != limit and offset + limit <= self.max_page_size:
            return offset + limit
        return limit

    def _first_page(self, *, offset: int, page_size: int) -> FirstPage:
        page_number = offset // page_size + 1
        skipped = (page_number - 1) * page_size
        return FirstPage(
            page_number=page_number,
            skipped_elements=skipped,
            start_offset=offset - skipped,
        )

    def _last_page(
        self,
        *,
        offset: int,
        limit: int,
        page_size: int,
        first_page: FirstPage,
    ) -> LastPage:
        # Without a limit the last page is only known once the data runs out
        if limit == 0:
            return LastPage()

        page_number = (offset + limit - 1) // page_size + 1
        return LastPage(
            page_number=page_number,
            total_elements=page_number * page_size,
            end_offset=first_page.start_offset + limit - 1,
        )


def plan_window(*, offset: int, limit: int, max_page_size: int | None = None) -> PagePlan:
    """Plan a window without keeping a planner around.

    Args:
        offset: Number of leading elements to skip
        limit: Number of elements to take (0 = unbounded)
        max_page_size: Page size ceiling (defaults to the policy default)

    Returns:
        The page plan
    """
    policy = PagingPolicy() if max_page_size is None else _policy_for(max_page_size)
    return PagePlanner(policy).plan(offset=offset, limit=limit)


def _policy_for(max_page_size: int) -> PagingPolicy:
    try:
        return PagingPolicy(max_page_size=max_page_size)
    except ValueError as e:
        raise PlanningError(str(e)) from e
