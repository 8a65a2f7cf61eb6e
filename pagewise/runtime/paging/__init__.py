"""Paging layer for offset/limit windows over numbered remote pages.

This module provides the planning and execution logic that turns an
arbitrary offset/limit window into a minimal sequence of fixed-size page
requests, and streams the exact window back one row at a time.

Architecture:
    The paging layer consists of:
    - definitions.py: Paging policy and page fetcher contracts
    - planners.py: Page planning logic (page size, page range, slices)
    - cursor.py: Forward-only position in the planned page range
    - executors.py: Page execution logic (fetches, crops and streams rows)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .cursor import PageCursor
from .definitions import (
    DEFAULT_MAX_PAGE_SIZE,
    AsyncPageFetcher,
    PageFetcher,
    PageResult,
    PagingPolicy,
    coerce_page_result,
)
from .executors import PageExecutor
from .planners import PagePlanner, plan_window, validate_window

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "AsyncPageFetcher",
    "PageCursor",
    "PageExecutor",
    "PageFetcher",
    "PagePlanner",
    "PageResult",
    "PagingPolicy",
    "coerce_page_result",
    "plan_window",
    "validate_window",
]
