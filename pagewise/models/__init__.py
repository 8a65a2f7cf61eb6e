"""Data models for page planning and page fetching.

Architecture:
    This module exports the Pydantic v2 models shared by the planner, the
    executor and page drivers. All models are immutable (frozen=True), so a
    cached plan can be shared between callers.

Model Categories:
    - Planning: FirstPage, LastPage, PagePlan
    - Driver exchange: PageRequest, FetchedPage
"""

from .page import FetchedPage, PageRequest
from .plan import FirstPage, LastPage, PagePlan

__all__ = [
    "FetchedPage",
    "FirstPage",
    "LastPage",
    "PagePlan",
    "PageRequest",
]
