"""
Tests for input validation ahead of the record store
"""

import pytest
from datetime import datetime

from eventease.core.errors import ErrorCode, RecordValidationError
from eventease.models import Attendance, Event, Registration, RegistrationStatus
from eventease.schemas import validate_attendance, validate_event, validate_registration

def valid_registration_data(**overrides):
    data = {
        "event_id": 1,
        "name": "Jane Smith",
        "email": "jane.smith@email.com",
        "contact_number": "(555) 010-2030",
    }
    data.update(overrides)
    return data

def test_validate_registration_valid():
    """Test a valid registration becomes a pending record"""
    registration = validate_registration(valid_registration_data())

    assert isinstance(registration, Registration)
    assert registration.id == 0
    assert registration.email == "jane.smith@email.com"
    assert registration.status == RegistrationStatus.PENDING
    assert registration.registered_date is None

@pytest.mark.parametrize("field,value", [
    ("name", "J"),
    ("name", "x" * 101),
    ("email", "not-an-email"),
    ("contact_number", "555-0101"),
    ("contact_number", "1" * 21),
    ("contact_number", "call me maybe"),
    ("event_id", 0),
])
def test_validate_registration_rejects(field, value):
    """Test each constrained field is checked"""
    with pytest.raises(RecordValidationError) as exc_info:
        validate_registration(valid_registration_data(**{field: value}))

    error = exc_info.value
    assert error.code == ErrorCode.VALIDATION_FAILED
    assert [e["field"] for e in error.errors] == [field]

def test_validate_registration_missing_fields():
    """Test missing required fields are all reported"""
    with pytest.raises(RecordValidationError) as exc_info:
        validate_registration({"name": "Jane Smith"})

    fields = {e["field"] for e in exc_info.value.errors}
    assert fields == {"event_id", "email", "contact_number"}

def test_validation_error_to_dict():
    """Test the error payload shape"""
    with pytest.raises(RecordValidationError) as exc_info:
        validate_registration(valid_registration_data(email="nope"))

    payload = exc_info.value.to_dict()
    assert payload["success"] is False
    assert payload["error_code"] == "VALIDATION_FAILED"
    assert payload["details"][0]["field"] == "email"

def test_validate_event():
    """Test event validation"""
    event = validate_event({"name": "Book Fair", "date": "2025-09-01T10:00:00", "location": "Library"})
    assert isinstance(event, Event)
    assert event.date == datetime(2025, 9, 1, 10, 0)

    with pytest.raises(RecordValidationError):
        validate_event({"name": "", "date": "2025-09-01T10:00:00"})

def test_validate_attendance():
    """Test attendance validation requires both references"""
    attendance = validate_attendance({"event_id": 1, "registration_id": 2, "notes": "VIP"})
    assert isinstance(attendance, Attendance)
    assert attendance.check_in_time is None

    with pytest.raises(RecordValidationError) as exc_info:
        validate_attendance({"event_id": 1})
    assert exc_info.value.errors[0]["field"] == "registration_id"
