"""pagewise - Offset/limit windows over numbered remote pages.

Plans the minimal sequence of fixed-size page requests for an arbitrary
offset/limit window and lazily streams the exact window back, one row at a
time, from an injected page driver.
"""

from .api import (
    CriteriaSettings,
    SearchCriteria,
    aexists,
    afind_first,
    aiterate,
    current_page,
    exists,
    find_first,
    is_first_page,
    is_last_page,
    iterate,
    plan,
)
from .core import FetchError, NotFoundError, PagingError, PlanningError
from .models import FetchedPage, FirstPage, LastPage, PagePlan, PageRequest
from .runtime.paging import (
    DEFAULT_MAX_PAGE_SIZE,
    PageCursor,
    PageExecutor,
    PagePlanner,
    PagingPolicy,
    plan_window,
)
from .runtime.rest import RestPageFetcher, RestSearchSpec
from .utils import HTTPClient

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "CriteriaSettings",
    "FetchError",
    "FetchedPage",
    "FirstPage",
    "HTTPClient",
    "LastPage",
    "NotFoundError",
    "PageCursor",
    "PageExecutor",
    "PagePlan",
    "PagePlanner",
    "PageRequest",
    "PagingError",
    "PagingPolicy",
    "PlanningError",
    "RestPageFetcher",
    "RestSearchSpec",
    "SearchCriteria",
    "aexists",
    "afind_first",
    "aiterate",
    "current_page",
    "exists",
    "find_first",
    "is_first_page",
    "is_last_page",
    "iterate",
    "plan",
    "plan_window",
]
