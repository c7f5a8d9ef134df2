"""
Event model
"""

from datetime import datetime
from pydantic import BaseModel, Field

class Event(BaseModel):
    id: int = 0
    name: str = ""
    date: datetime = Field(default_factory=datetime.now)
    location: str = ""
    description: str = ""
