"""
Event input schema
"""

from datetime import datetime
from pydantic import BaseModel, Field

from eventease.models import Event

__all__ = ["EventCreate"]

class EventCreate(BaseModel):
    """Schema for creating or editing an event"""
    name: str = Field(..., min_length=1)
    date: datetime
    location: str = ""
    description: str = ""

    def to_record(self) -> Event:
        return Event(**self.model_dump())
