"""
Visitor counter.

The count only moves when a read arrives after the configured interval has
elapsed since the last increment; it is not a scheduler.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

from app.utils.clock import utc_now
from app.ports.counter_port import VisitorCounterPort
from app.utils.logger import counter_logger


class VisitorService:

    def __init__(
        self,
        counter: VisitorCounterPort,
        start_count: int = 905,
        interval: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._counter = counter
        self._start_count = start_count
        self._interval = interval
        self._clock = clock

    async def current_count(self, now: Optional[datetime] = None) -> int:
        """Return the visitor count, bumping it first if the interval has elapsed."""
        now = now or self._clock()
        await self._counter.ensure_exists(self._start_count, now)

        bumped = await self._counter.increment_if_stale(now - self._interval, now)
        if bumped is not None:
            counter_logger.info(f"Visitor count incremented to {bumped}")
            return bumped

        return await self._counter.get_count()
