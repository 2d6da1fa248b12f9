# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Calendar field metadata and search constants."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

# Day-level search window; covers a leap year.
SEARCH_HORIZON_DAYS = 366

# Added to the wait delay so the timer fires after the minute boundary.
WAIT_MARGIN_SECONDS = 10.0


class Field(IntEnum):
    """One calendar dimension of a constraint.

    Declaration order is also the canonical token order of the
    five-field text form: minute hour day-of-month month day-of-week.
    """

    MINUTE = 0
    HOUR = 1
    DAY_OF_MONTH = 2
    MONTH = 3
    DAY_OF_WEEK = 4

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive ``(min, max)`` of accepted raw values."""
        return _BOUNDS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def size(self) -> int:
        """Number of distinct bit positions for this field."""
        if self is Field.DAY_OF_WEEK:
            return 7
        lo, hi = self.bounds
        return hi - lo + 1

    def index(self, value: int) -> int:
        """Map a calendar value to its zero-based bit position.

        Both 0 and 7 mean Sunday for ``DAY_OF_WEEK``.
        """
        if self is Field.DAY_OF_WEEK:
            return 0 if value == 7 else value
        return value - self.bounds[0]

    def value_of(self, index: int) -> int:
        return index + self.bounds[0]

    def extract(self, t: datetime) -> int:
        """Return the calendar value of *t* for this field."""
        if self is Field.MINUTE:
            return t.minute
        if self is Field.HOUR:
            return t.hour
        if self is Field.DAY_OF_MONTH:
            return t.day
        if self is Field.MONTH:
            return t.month
        # Python: Monday=1 .. Sunday=7; cron: Sunday=0
        return t.isoweekday() % 7


_BOUNDS: dict[Field, tuple[int, int]] = {
    Field.MINUTE: (0, 59),
    Field.HOUR: (0, 23),
    Field.DAY_OF_MONTH: (1, 31),
    Field.MONTH: (1, 12),
    Field.DAY_OF_WEEK: (0, 7),
}

_LABELS: dict[Field, str] = {
    Field.MINUTE: "minute",
    Field.HOUR: "hour",
    Field.DAY_OF_MONTH: "day",
    Field.MONTH: "month",
    Field.DAY_OF_WEEK: "dayofweek",
}
