"""
Registration model
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel

class RegistrationStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    ATTENDED = "Attended"

class Registration(BaseModel):
    """Attendee registration for an event.

    Field constraints are enforced by eventease.schemas, not here, so the
    store accepts whatever it is handed.
    """
    id: int = 0
    event_id: int = 0
    name: str = ""
    email: str = ""
    contact_number: str = ""
    registered_date: Optional[datetime] = None
    status: RegistrationStatus = RegistrationStatus.PENDING
    # Set together with status=ATTENDED when attendance is recorded
    attendance_confirmed: bool = False
