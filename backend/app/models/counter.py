from datetime import datetime
from beanie import Document, Indexed
from pydantic import Field

from app.utils.clock import utc_now

REFERENCE_COUNTER_KEY = "reference"
VISITOR_COUNTER_KEY = "visitors"


class ReferenceCounter(Document):
    """Singleton counter behind the reference numbers."""

    key: Indexed(str, unique=True) = REFERENCE_COUNTER_KEY
    value: int = Field(1, ge=1, alias="count")  # stored as "count"

    class Settings:
        name = "references"


class VisitorCounter(Document):
    """Singleton visitor counter, bumped at most once per interval."""

    key: Indexed(str, unique=True) = VISITOR_COUNTER_KEY
    value: int = Field(905, alias="count")  # stored as "count"
    last_updated: datetime = Field(default_factory=utc_now, alias="lastUpdated")

    class Settings:
        name = "visitor_counters"
