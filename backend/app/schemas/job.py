from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class JobBase(BaseModel):
    """Descriptive job fields, all optional"""
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    icon: Optional[str] = None

    class Config:
        populate_by_name = True

class JobCreate(JobBase):
    """Job creation payload; datePosted defaults to now"""
    date_posted: Optional[datetime] = Field(None, alias="datePosted")

class JobUpdate(JobBase):
    """Partial update payload; only supplied fields change"""
    date_posted: Optional[datetime] = Field(None, alias="datePosted")

class JobResponse(JobBase):
    id: str = Field(..., alias="_id")
    date_posted: datetime = Field(..., alias="datePosted")
