"""Search API: criteria building and paged search operations."""

from .criteria import CriteriaSettings, SearchCriteria
from .search import (
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

__all__ = [
    "CriteriaSettings",
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
]
