"""Runtime components: page planning/execution and the REST page driver."""

from .paging import PageCursor, PageExecutor, PagePlanner, PagingPolicy
from .rest import RestPageFetcher

__all__ = [
    "PageCursor",
    "PageExecutor",
    "PagePlanner",
    "PagingPolicy",
    "RestPageFetcher",
]
