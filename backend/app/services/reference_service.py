"""
Reference number generator.

Reference numbers look like ``007/03/2025``: the counter value zero-padded to
at least three digits, followed by the current month and year.
"""

from datetime import datetime
from typing import Optional

from app.ports.counter_port import ReferenceCounterPort
from app.utils.exceptions import ReferenceGenerationError
from app.utils.logger import counter_logger


def format_reference_number(count: int, when: datetime) -> str:
    return f"{count:03d}/{when:%m}/{when:%Y}"


class ReferenceService:
    """Hands out monotonically increasing reference numbers."""

    def __init__(self, counter: ReferenceCounterPort) -> None:
        self._counter = counter

    async def next_reference_number(self, now: Optional[datetime] = None) -> str:
        try:
            count = await self._counter.increment()
        except Exception as e:
            counter_logger.error(f"Reference counter increment failed: {e}")
            raise ReferenceGenerationError() from e

        reference_number = format_reference_number(count, now or datetime.now())
        counter_logger.info(f"Reference number issued: {reference_number}")
        return reference_number
