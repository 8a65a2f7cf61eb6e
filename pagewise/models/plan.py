"""Page plan data models."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from pydantic import BaseModel, ConfigDict, Field


class FirstPage(BaseModel):
    """The page holding the first element of the window.

    Attributes:
        page_number: One-based number of the first page to request
        skipped_elements: Elements on all pages before the first page
        start_offset: Leading elements of the first page outside the window
    """

    page_number: int = Field(..., ge=1)
    skipped_elements: int = Field(..., ge=0)
    start_offset: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class LastPage(BaseModel):
    """The page holding the last element of the window.

    ``page_number`` and ``total_elements`` are ``None`` when the window has
    no limit, so the last page is unknown until the remote data runs out.

    Attributes:
        page_number: One-based number of the last page (None = open end)
        total_elements: Elements up to the end of the last page (None = open end)
        end_offset: Index of the window's last element within the
            concatenated planned pages (-1 = open end)
    """

    page_number: int | None = Field(default=None, ge=1)
    total_elements: int | None = Field(default=None, ge=0)
    end_offset: int = Field(default=-1, ge=-1)

    model_config = ConfigDict(frozen=True)

    @property
    def is_open(self) -> bool:
        """Whether the last page is unbounded."""
        return self.page_number is None


class PagePlan(BaseModel):
    """Request plan for an offset/limit window over numbered pages.

    Fetching ``pages()`` at ``page_size``, concatenating the pages in order
    and applying ``absolute_slice`` reproduces the requested window exactly.
    The relative slices do the same one page at a time for stream
    processing.
    """

    offset: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)
    page_size: int = Field(..., ge=1)
    first_page: FirstPage
    last_page: LastPage

    model_config = ConfigDict(frozen=True)

    @property
    def is_open(self) -> bool:
        """Whether the plan runs until the remote data is exhausted."""
        return self.last_page.is_open

    @property
    def page_range(self) -> range | None:
        """Planned page numbers, or None for an open-ended plan."""
        if self.last_page.page_number is None:
            return None
        return range(self.first_page.page_number, self.last_page.page_number + 1)

    @property
    def page_count(self) -> int | None:
        """Number of planned pages, or None for an open-ended plan."""
        pages = self.page_range
        return None if pages is None else len(pages)

    def pages(self) -> Iterator[int]:
        """Iterate the planned page numbers (endless for open plans)."""
        pages = self.page_range
        if pages is None:
            return count(self.first_page.page_number)
        return iter(pages)

    @property
    def result_span(self) -> tuple[int, int]:
        """Inclusive window bounds over the concatenated pages (-1 = open end)."""
        return (self.first_page.start_offset, self.last_page.end_offset)

    @property
    def absolute_slice(self) -> slice:
        """The window as a slice over the concatenated pages."""
        if self.is_open:
            return slice(self.first_page.start_offset, None)
        return slice(self.first_page.start_offset, self.last_page.end_offset + 1)

    @property
    def relative_first_page_slice(self) -> slice:
        """Slice to apply to the raw first page."""
        return slice(self.first_page.start_offset, None)

    @property
    def relative_last_page_span(self) -> tuple[int, int]:
        """Inclusive bounds to keep of the raw last page (end -1 = whole page)."""
        keep = self._last_page_keep()
        if keep is None or keep == self.page_size:
            return (0, -1)
        return (0, keep - 1)

    @property
    def relative_last_page_slice(self) -> slice:
        """Slice to apply to the raw last page."""
        start, end = self.relative_last_page_span
        return slice(start, None if end == -1 else end + 1)

    @property
    def first_page_aligned(self) -> bool:
        """Whether the first page can be used without slicing."""
        return self.first_page.start_offset == 0

    @property
    def last_page_aligned(self) -> bool:
        """Whether the last page can be used without slicing."""
        return self.relative_last_page_span[1] == -1

    @property
    def first_page_unaligned(self) -> bool:
        return not self.first_page_aligned

    @property
    def last_page_unaligned(self) -> bool:
        return not self.last_page_aligned

    def _last_page_keep(self) -> int | None:
        # Rows of the raw last page that belong to the window
        page_count = self.page_count
        if page_count is None:
            return None
        return self.last_page.end_offset - (page_count - 1) * self.page_size + 1
