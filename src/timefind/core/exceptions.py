# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for timefind."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timefind.core.constants import Field


class TimefindError(Exception):
    """Base exception for all timefind errors."""


class RangeError(TimefindError, ValueError):
    """A value lies outside the valid bounds of a calendar field."""

    def __init__(self, field: Field, value: int) -> None:
        self.field = field
        self.value = value
        self.bounds = field.bounds
        lo, hi = self.bounds
        super().__init__(
            f"{field.label} should be between {lo} and {hi}. Given: {value}"
        )


class ParseError(TimefindError, ValueError):
    """Selector text or a five-field expression could not be parsed."""


class EmptyError(TimefindError):
    """The constraint would no longer accept any timestamp."""

    def __init__(self, message: str = "No date is available") -> None:
        super().__init__(message)


class UnsatisfiableError(TimefindError):
    """No occurrence exists within the search horizon or the upper bound."""
