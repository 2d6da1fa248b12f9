# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Occurrence search — match timestamps and find the next occurrence.

The search cascades from the most granular field outwards instead of
stepping through every minute of the year:

1. the remaining minutes of the starting hour,
2. the remaining hours of the starting day at the lowest accepted minute,
3. up to ``SEARCH_HORIZON_DAYS`` days at the lowest accepted hour and minute.

All arithmetic is done on the wall-clock fields of the given ``datetime``;
no time-zone conversion takes place.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from timefind.core.constants import SEARCH_HORIZON_DAYS, Field
from timefind.core.exceptions import UnsatisfiableError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from timefind.query.constraint import Constraint

logger = logging.getLogger("timefind.query.search")

_ONE_MINUTE = timedelta(minutes=1)


def _truncate(t: datetime) -> datetime:
    return t.replace(second=0, microsecond=0)


def match(constraint: Constraint, t: datetime) -> bool:
    """Return ``True`` if every calendar field of *t* is accepted.

    Bounds are not consulted; see ``Constraint.contains``.
    """
    return all(constraint.test(f, f.extract(t)) for f in Field)


def _first_match(constraint: Constraint, start: datetime) -> datetime:
    """Earliest matching minute at or after *start* (already minute-aligned)."""
    # Remaining minutes of the current hour
    for offset in range(60 - start.minute):
        candidate = start + timedelta(minutes=offset)
        if match(constraint, candidate):
            logger.debug("Matched %s within the starting hour", candidate)
            return candidate

    first_minute = constraint.field(Field.MINUTE).lowest_set_index()
    hour_start = start.replace(minute=first_minute) + timedelta(hours=1)

    # Remaining hours of the current day at the lowest accepted minute
    for offset in range(24 - hour_start.hour):
        candidate = hour_start + timedelta(hours=offset)
        if match(constraint, candidate):
            logger.debug("Matched %s within the starting day", candidate)
            return candidate

    first_hour = constraint.field(Field.HOUR).lowest_set_index()
    day_start = hour_start.replace(hour=first_hour) + timedelta(days=1)

    for offset in range(SEARCH_HORIZON_DAYS):
        candidate = day_start + timedelta(days=offset)
        if match(constraint, candidate):
            logger.debug("Matched %s after %d day(s)", candidate, offset + 1)
            return candidate

    raise UnsatisfiableError(
        f"No date was selected within {SEARCH_HORIZON_DAYS} days of {start.isoformat()} "
        f"for constraint {constraint}"
    )


def _next_ignoring_upper(constraint: Constraint, start: datetime) -> datetime:
    lower = constraint.lower.instant
    if lower is not None and lower > start:
        start = lower
    return _first_match(constraint, _truncate(start) + _ONE_MINUTE)


def next_occurrence(constraint: Constraint, start: datetime) -> datetime:
    """Return the earliest occurrence strictly after *start*.

    The result is truncated to the minute.  A lower bound later than
    *start* replaces it, so the result is also strictly after the bound;
    the upper bound is inclusive.

    Raises:
        UnsatisfiableError: If no occurrence exists within the search
            horizon or before the upper bound.
    """
    found = _next_ignoring_upper(constraint, start)
    upper = constraint.upper.instant
    if upper is not None and found > upper:
        raise UnsatisfiableError(
            f"Next occurrence {found.isoformat()} lies after the upper bound "
            f"{upper.isoformat()}"
        )
    return found


def next_list(constraint: Constraint, start: datetime, n: int) -> list[datetime]:
    """Return exactly *n* successive occurrences after *start*."""
    if n < 0:
        raise ValueError(f"Occurrence count must be non-negative, got {n}")
    result: list[datetime] = []
    t = start
    for _ in range(n):
        t = next_occurrence(constraint, t)
        result.append(t)
    return result


def iter_occurrences(constraint: Constraint, start: datetime) -> Iterator[datetime]:
    """Lazily yield occurrences after *start*.

    The iterator ends once the upper bound is passed; an unbounded
    constraint keeps yielding and raises ``UnsatisfiableError`` only when a
    gap exceeds the search horizon.
    """
    upper = constraint.upper.instant
    t = start
    while True:
        t = _next_ignoring_upper(constraint, t)
        if upper is not None and t > upper:
            return
        yield t
