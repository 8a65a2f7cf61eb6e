"""Structured logging for paging operations.

This module provides telemetry hooks for planning and executing paged
searches, emitting structured logs for observability.
"""

from __future__ import annotations

import logging

from ...models import PagePlan

logger = logging.getLogger(__name__)


def log_page_plan(*, plan: PagePlan, max_page_size: int) -> None:
    """Log page plan creation.

    Args:
        plan: The freshly computed page plan
        max_page_size: Page size ceiling the plan was computed with
    """
    logger.info(
        "page_plan_created",
        extra={
            "offset": plan.offset,
            "limit": plan.limit,
            "page_size": plan.page_size,
            "max_page_size": max_page_size,
            "first_page": plan.first_page.page_number,
            "last_page": plan.last_page.page_number,
            "first_page_aligned": plan.first_page_aligned,
            "last_page_aligned": plan.last_page_aligned,
        },
    )


def log_page_fetched(
    *,
    page_number: int,
    raw_count: int,
    rows_yielded: int,
    latency_ms: float | None = None,
) -> None:
    """Log a single fetched page.

    Args:
        page_number: Page number that was fetched
        raw_count: Unsliced row count reported by the driver
        rows_yielded: Rows of this page that belong to the window
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "page_number": page_number,
            "raw_count": raw_count,
            "rows_yielded": rows_yielded,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetch_error(
    *,
    page_number: int,
    error_type: str,
    error_message: str,
    suppressed: bool,
) -> None:
    """Log a failed page fetch.

    Suppressed failures are turned into empty pages and logged as warnings;
    propagated failures are logged as errors.

    Args:
        page_number: Page number that failed
        error_type: Type of error (e.g., "FetchError")
        error_message: Error message
        suppressed: Whether the error was swallowed into an empty page
    """
    extra = {
        "page_number": page_number,
        "error_type": error_type,
        "error_message": error_message,
    }
    if suppressed:
        logger.warning("page_fetch_suppressed", extra=extra)
    else:
        logger.error("page_fetch_error", extra=extra)


def log_iteration_complete(
    *,
    pages_fetched: int,
    rows_yielded: int,
    short_page: bool,
    total_latency_ms: float | None = None,
) -> None:
    """Log the end of a paged iteration.

    Args:
        pages_fetched: Number of page requests issued
        rows_yielded: Number of rows handed to the consumer
        short_page: Whether a short page ended the iteration early
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "page_iteration_complete",
        extra={
            "pages_fetched": pages_fetched,
            "rows_yielded": rows_yielded,
            "short_page": short_page,
            "total_latency_ms": total_latency_ms,
        },
    )
