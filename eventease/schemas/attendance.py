"""
Attendance input schema
"""

from pydantic import BaseModel, Field

from eventease.models import Attendance

__all__ = ["AttendanceCreate"]

class AttendanceCreate(BaseModel):
    """Schema for recording a check-in"""
    event_id: int = Field(..., gt=0)
    registration_id: int = Field(..., gt=0)
    attendee_email: str = ""
    notes: str = ""

    def to_record(self) -> Attendance:
        return Attendance(**self.model_dump())
