"""
Tests for registration and check-in orchestration
"""

import pytest
from datetime import datetime

from eventease.models import AttendanceStatus, Event, Registration, RegistrationStatus
from eventease.services.checkin_service import CheckInService
from eventease.services.record_store import RecordStore
from eventease.services.sample_data import seed_sample_data
from eventease.services.session_tracker import SessionTracker

NOW = datetime(2025, 3, 15, 8, 45)

@pytest.fixture
def store():
    """Store seeded with the sample events and registrations"""
    store = RecordStore(clock=lambda: NOW)
    seed_sample_data(store)
    return store

@pytest.fixture
def tracker():
    tracker = SessionTracker(clock=lambda: NOW)
    tracker.initialize_session("Front Desk", "desk@eventease.com")
    return tracker

@pytest.fixture
def service(store, tracker):
    return CheckInService(store, tracker)

def test_sample_data(store):
    """Test the seeded events and registrations"""
    events = store.list_events()
    assert [e.id for e in events] == [1, 2, 3]
    assert events[0].name == "Tech Conference 2025"

    registrations = store.list_registrations_by_event(1)
    assert [r.name for r in registrations] == ["John Smith", "Sarah Johnson"]
    assert all(r.status == RegistrationStatus.CONFIRMED for r in registrations)
    assert registrations[0].registered_date < registrations[1].registered_date < NOW

def test_view_event(service, tracker):
    """Test viewing records the event in the session"""
    event = service.view_event(2)
    assert event.name == "Music Festival"

    assert service.view_event(99) is None
    assert tracker.current_session.viewed_events == [2]

def test_register_attendee(service, store, tracker):
    """Test registration goes to the store and the session"""
    registration = service.register_attendee(Registration(
        event_id=3,
        name="Alice Brown",
        email="alice.brown@email.com",
        contact_number="+1 312 555 0199"
    ))

    assert registration.id == 3
    assert store.get_registration(3) is registration
    assert registration.status == RegistrationStatus.PENDING
    assert tracker.current_session.registered_events == [3]

def test_check_in(service, store):
    """Test check-in records attendance and confirms the registration"""
    result = service.check_in(1, notes="Arrived early")

    assert result == {
        "attendance_id": 1,
        "registration_id": 1,
        "event_id": 1,
        "attendee_email": "john.smith@email.com",
        "was_already_checked_in": False,
        "timestamp": NOW.isoformat(),
    }
    attendance = store.list_attendances_by_event(1)[0]
    assert attendance.notes == "Arrived early"

    registration = store.get_registration(1)
    assert registration.status == RegistrationStatus.ATTENDED
    assert registration.attendance_confirmed is True

def test_check_in_twice(service, store):
    """Test a second check-in is flagged and still recorded"""
    service.check_in(2)
    result = service.check_in(2)

    assert result["was_already_checked_in"] is True
    assert result["attendance_id"] == 2
    assert len(store.list_attendances()) == 2

def test_check_in_unknown_registration(service, store):
    """Test check-in for a missing registration returns None"""
    assert service.check_in(404) is None
    assert store.list_attendances() == []

def test_check_out(service, store):
    """Test check-out updates the attendance record"""
    result = service.check_in(1)
    attendance = service.check_out(result["attendance_id"])

    assert attendance.status == AttendanceStatus.CHECKED_OUT
    assert attendance.check_out_time == NOW
    assert store.list_attendances() == [attendance]
    assert service.check_out(50) is None

def test_attendance_summary(service, store):
    """Test per-event counts"""
    store.add_registration(Registration(event_id=1, name="Bob Johnson"))
    service.check_in(1)
    service.check_in(2)
    service.check_out(2)
    store.cancel_registration(3)

    summary = service.attendance_summary(1)
    assert summary["total_registrations"] == 3
    assert summary["registrations_by_status"] == {
        "Pending": 0,
        "Confirmed": 0,
        "Cancelled": 1,
        "Attended": 2,
    }
    assert summary["total_attendances"] == 2
    assert summary["checked_in"] == 1
    assert summary["checked_out"] == 1

def test_attendance_summary_unknown_event(service):
    """Test an event with no records summarises to zeros"""
    summary = service.attendance_summary(42)
    assert summary["total_registrations"] == 0
    assert summary["total_attendances"] == 0
