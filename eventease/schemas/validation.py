"""
Input validation in front of the record store
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from eventease.core.errors import RecordValidationError
from eventease.models import Attendance, Event, Registration
from eventease.schemas.attendance import AttendanceCreate
from eventease.schemas.event import EventCreate
from eventease.schemas.registration import RegistrationCreate

__all__ = ["validate_event", "validate_registration", "validate_attendance"]

def _flatten_errors(exc: ValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

def _validate(schema: Type[BaseModel], data: Dict[str, Any], label: str):
    try:
        return schema.model_validate(data).to_record()
    except ValidationError as exc:
        raise RecordValidationError(f"Invalid {label}", _flatten_errors(exc)) from exc

def validate_event(data: Dict[str, Any]) -> Event:
    return _validate(EventCreate, data, "event")

def validate_registration(data: Dict[str, Any]) -> Registration:
    return _validate(RegistrationCreate, data, "registration")

def validate_attendance(data: Dict[str, Any]) -> Attendance:
    return _validate(AttendanceCreate, data, "attendance")
