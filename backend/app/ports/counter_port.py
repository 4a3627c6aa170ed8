from abc import ABC, abstractmethod
from datetime import datetime


class ReferenceCounterPort(ABC):
    @abstractmethod
    async def increment(self) -> int:
        """Atomically add one to the counter (creating it at 1) and return the new value."""
        ...


class VisitorCounterPort(ABC):
    @abstractmethod
    async def ensure_exists(self, start_count: int, now: datetime) -> None:
        """Create the counter with ``start_count`` if it does not exist yet."""
        ...

    @abstractmethod
    async def increment_if_stale(self, cutoff: datetime, now: datetime) -> int | None:
        """
        Atomically bump the count and stamp ``now`` when the last update is at
        or before ``cutoff``. Returns the new count, or None if it was not stale.
        """
        ...

    @abstractmethod
    async def get_count(self) -> int:
        """Read the current count."""
        ...
