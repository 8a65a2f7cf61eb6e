"""Page cursor tracking the paging execution."""

from __future__ import annotations

from ...models import PagePlan


class PageCursor:
    """Forward-only position within a plan's page range.

    The cursor starts on the plan's first page and moves one page per
    ``advance()``. Open-ended plans never exhaust the cursor; bounded plans
    exhaust it after their last page.
    """

    def __init__(self, plan: PagePlan) -> None:
        self._first = plan.first_page.page_number
        self._last = plan.last_page.page_number
        self._position = self._first

    @property
    def first_page(self) -> int:
        return self._first

    @property
    def last_page(self) -> int | None:
        return self._last

    @property
    def exhausted(self) -> bool:
        """Whether the cursor moved past the planned last page."""
        return self._last is not None and self._position > self._last

    def peek(self) -> int | None:
        """Return the current page without advancing, or None when exhausted."""
        if self.exhausted:
            return None
        return self._position

    def advance(self) -> int | None:
        """Move to the next page.

        Returns:
            The new current page, or None when the range is exhausted
        """
        if not self.exhausted:
            self._position += 1
        return self.peek()

    def rewind(self) -> None:
        """Move back to the first planned page."""
        self._position = self._first

    @property
    def on_first_page(self) -> bool:
        return self.peek() == self._first

    @property
    def on_last_page(self) -> bool:
        # Open ranges never reach their last page
        return self._last is not None and self.peek() == self._last

    def __repr__(self) -> str:
        last = "inf" if self._last is None else self._last
        return f"PageCursor(pages={self._first}..{last}, current={self.peek()})"
