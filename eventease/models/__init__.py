"""
Record models package
"""

from .event import Event
from .registration import Registration, RegistrationStatus
from .attendance import Attendance, AttendanceStatus
from .session import SessionValue, UserSession, ValueKind

__all__ = [
    "Event",
    "Registration",
    "RegistrationStatus",
    "Attendance",
    "AttendanceStatus",
    "SessionValue",
    "UserSession",
    "ValueKind",
]
