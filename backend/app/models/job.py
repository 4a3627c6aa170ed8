from typing import Optional
from datetime import datetime
from beanie import Document
from pydantic import Field
from app.utils.clock import utc_now


class Job(Document):
    """Job posting, stored exactly as the client sent it."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    date_posted: datetime = Field(default_factory=utc_now, alias="datePosted")
    icon: Optional[str] = None

    class Settings:
        name = "jobs"
