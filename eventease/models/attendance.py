"""
Attendance model
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel

class AttendanceStatus(str, Enum):
    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"
    NO_SHOW = "NoShow"

class Attendance(BaseModel):
    id: int = 0
    event_id: int = 0
    registration_id: int = 0
    attendee_email: str = ""
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    status: AttendanceStatus = AttendanceStatus.CHECKED_IN
    notes: str = ""
