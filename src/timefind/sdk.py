# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convenience interface for querying constraints relative to now.

Usage::

    from timefind import from_string, next_now, wait_next_sync

    nightly = from_string("30 2 * * *")
    print(next_now(nightly))

    # Block until 02:30 (plus the safety margin)
    wait_next_sync(nightly)
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from timefind.core.config import Settings, get_settings
from timefind.query.constraint import Constraint
from timefind.query.search import next_list, next_occurrence
from timefind.scheduler.wait import wait_next

logger = logging.getLogger("timefind.sdk")


def next_now(constraint: Constraint) -> datetime:
    """Return the next occurrence of *constraint* after the current time."""
    return next_occurrence(constraint, datetime.now())


def next_now_list(constraint: Constraint, n: int) -> list[datetime]:
    """Return the next *n* occurrences of *constraint* after the current time."""
    return next_list(constraint, datetime.now(), n)


def match_now(constraint: Constraint) -> bool:
    return constraint.contains(datetime.now())


async def wait_next_async(
    constraint: Constraint,
    *,
    settings: Settings | None = None,
) -> datetime:
    """Sleep until the next occurrence, using the configured margin."""
    settings = settings or get_settings()
    return await wait_next(constraint, margin=settings.wait_margin_seconds)


def wait_next_sync(
    constraint: Constraint,
    *,
    settings: Settings | None = None,
) -> datetime:
    """Synchronous wrapper around :func:`wait_next_async`.

    Cannot be called from inside a running event loop.
    """
    return asyncio.run(wait_next_async(constraint, settings=settings))
