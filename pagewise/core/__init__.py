"""Core library primitives."""

from .exceptions import FetchError, NotFoundError, PagingError, PlanningError

__all__ = [
    "FetchError",
    "NotFoundError",
    "PagingError",
    "PlanningError",
]
