# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""timefind - cron-style calendar constraints and next-occurrence search."""

__version__ = "0.1.0"

from timefind.core.constants import Field
from timefind.core.exceptions import (
    EmptyError,
    ParseError,
    RangeError,
    TimefindError,
    UnsatisfiableError,
)
from timefind.query.constraint import (
    Bound,
    Constraint,
    after,
    before,
    between,
    combine,
    day,
    days,
    from_selector,
    from_string,
    from_values,
    hour,
    hours,
    minute,
    minutes,
    month,
    months,
    to_string,
    weekday,
    weekdays,
)
from timefind.query.search import iter_occurrences, match, next_list, next_occurrence
from timefind.scheduler.wait import WaitHandle, wait_next
from timefind.sdk import match_now, next_now, next_now_list, wait_next_async, wait_next_sync

__all__ = [
    "Bound",
    "Constraint",
    "EmptyError",
    "Field",
    "ParseError",
    "RangeError",
    "TimefindError",
    "UnsatisfiableError",
    "WaitHandle",
    "__version__",
    "after",
    "before",
    "between",
    "combine",
    "day",
    "days",
    "from_selector",
    "from_string",
    "from_values",
    "hour",
    "hours",
    "iter_occurrences",
    "match",
    "match_now",
    "minute",
    "minutes",
    "month",
    "months",
    "next_list",
    "next_now",
    "next_now_list",
    "next_occurrence",
    "to_string",
    "wait_next",
    "wait_next_async",
    "wait_next_sync",
    "weekday",
    "weekdays",
]
