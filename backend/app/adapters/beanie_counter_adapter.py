"""
Beanie/Motor implementations of the counter ports.

Both counters are single documents keyed by a unique ``key``. Every mutation is
one atomic server-side update, so concurrent requests cannot hand out the same
reference number or double-count a visitor interval.
"""

from datetime import datetime

from pymongo import ReturnDocument

from app.models.counter import (
    REFERENCE_COUNTER_KEY,
    VISITOR_COUNTER_KEY,
    ReferenceCounter,
    VisitorCounter,
)
from app.ports.counter_port import ReferenceCounterPort, VisitorCounterPort


class BeanieReferenceCounterAdapter(ReferenceCounterPort):

    async def increment(self) -> int:
        counter = await ReferenceCounter.get_motor_collection().find_one_and_update(
            {"key": REFERENCE_COUNTER_KEY},
            {"$inc": {"count": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["count"]


class BeanieVisitorCounterAdapter(VisitorCounterPort):

    async def ensure_exists(self, start_count: int, now: datetime) -> None:
        await VisitorCounter.get_motor_collection().update_one(
            {"key": VISITOR_COUNTER_KEY},
            {"$setOnInsert": {"count": start_count, "lastUpdated": now}},
            upsert=True,
        )

    async def increment_if_stale(self, cutoff: datetime, now: datetime) -> int | None:
        counter = await VisitorCounter.get_motor_collection().find_one_and_update(
            {"key": VISITOR_COUNTER_KEY, "lastUpdated": {"$lte": cutoff}},
            {"$inc": {"count": 1}, "$set": {"lastUpdated": now}},
            return_document=ReturnDocument.AFTER,
        )
        return counter["count"] if counter else None

    async def get_count(self) -> int:
        counter = await VisitorCounter.get_motor_collection().find_one(
            {"key": VISITOR_COUNTER_KEY}
        )
        if counter is None:
            raise LookupError("visitor counter document is missing")
        return counter["count"]
