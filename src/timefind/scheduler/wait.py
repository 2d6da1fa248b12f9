# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""One-shot asyncio notification at a constraint's next occurrence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Generator
from datetime import datetime
from typing import Any

from timefind.core.constants import WAIT_MARGIN_SECONDS
from timefind.query.constraint import Constraint
from timefind.query.search import next_occurrence

logger = logging.getLogger("timefind.scheduler.wait")


class WaitHandle:
    """A single-fire timer armed for one occurrence.

    Await the handle (or ``wait()``) exactly once to receive the target
    occurrence.  ``cancel()`` disarms the timer; a pending or later
    wait then raises ``asyncio.CancelledError``.
    """

    def __init__(
        self,
        target: datetime,
        delay: float,
        margin: float,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self.target = target
        self.delay = delay
        self.margin = margin
        self._future: asyncio.Future[datetime] = loop.create_future()
        self._consumed = False
        self._timer = loop.call_later(max(delay, 0.0) + margin, self._fire)

    def _fire(self) -> None:
        if not self._future.done():
            self._future.set_result(self.target)
            logger.debug("Wait handle fired for %s", self.target.isoformat())

    @property
    def cancelled(self) -> bool:
        return self._future.cancelled()

    def done(self) -> bool:
        return self._future.done()

    def cancel(self) -> None:
        self._timer.cancel()
        self._future.cancel()

    async def wait(self) -> datetime:
        if self._consumed:
            raise RuntimeError("WaitHandle can only be awaited once")
        self._consumed = True
        return await self._future

    def __await__(self) -> Generator[Any, None, datetime]:
        return self.wait().__await__()


def wait_next(
    constraint: Constraint,
    *,
    margin: float | None = None,
    now: Callable[[], datetime] = datetime.now,
) -> WaitHandle:
    """Arm a timer for the next occurrence of *constraint* after now.

    Must be called while an event loop is running.  The timer fires
    ``margin`` seconds (default 10) after the occurrence so the caller
    wakes strictly after the target minute boundary.

    Raises:
        UnsatisfiableError: If the constraint has no next occurrence.
    """
    loop = asyncio.get_running_loop()
    current = now()
    target = next_occurrence(constraint, current)
    delay = (target - current).total_seconds()
    margin = WAIT_MARGIN_SECONDS if margin is None else margin

    logger.info(
        "Waiting %.1fs (+%.1fs margin) for next occurrence %s",
        delay,
        margin,
        target.isoformat(),
        extra={"constraint": str(constraint), "occurrence": target.isoformat()},
    )
    return WaitHandle(target, delay, margin, loop)
