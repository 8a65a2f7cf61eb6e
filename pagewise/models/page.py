"""Page request and fetched page models exchanged with page drivers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PageRequest(BaseModel):
    """Criteria snapshot for a single page request.

    Offset and limit are consumed by the planner and never reach the driver;
    the driver only sees the filters, the sort spec and the page to fetch.
    """

    filters: dict[str, Any] = Field(default_factory=dict)
    sort: Any = None
    page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class FetchedPage(BaseModel):
    """Rows returned by a driver for one page.

    ``raw_count`` is the unsliced number of rows the remote page contained.
    It defaults to the number of rows, and drivers which already slice must
    still report the remote count here.
    """

    rows: list[Any] = Field(default_factory=list)
    raw_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_raw_count(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("raw_count") is None:
            data = dict(data)
            data["raw_count"] = len(data.get("rows") or [])
        return data

    @classmethod
    def empty(cls) -> FetchedPage:
        return cls(rows=[], raw_count=0)
