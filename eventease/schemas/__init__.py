"""
Pydantic input schemas package
"""

from .event import *
from .registration import *
from .attendance import *
from .validation import *

__all__ = [
    "EventCreate",
    "RegistrationCreate",
    "AttendanceCreate",
    "validate_event",
    "validate_registration",
    "validate_attendance",
]
