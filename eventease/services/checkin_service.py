"""
Attendee registration and check-in orchestration
"""

import logging
from collections import Counter
from typing import Dict, Optional

from eventease.models import (
    Attendance,
    AttendanceStatus,
    Event,
    Registration,
    RegistrationStatus,
)
from eventease.services.record_store import RecordStore
from eventease.services.session_tracker import SessionTracker

logger = logging.getLogger(__name__)

class CheckInService:
    """Ties the record store to the current user's session"""

    def __init__(self, store: RecordStore, tracker: SessionTracker):
        self.store = store
        self.tracker = tracker

    def view_event(self, event_id: int) -> Optional[Event]:
        """Look up an event and remember it as viewed"""
        event = self.store.get_event(event_id)
        if event is not None:
            self.tracker.add_viewed_event(event_id)
        return event

    def register_attendee(self, registration: Registration) -> Registration:
        """Add a registration and note the event in the session"""
        self.store.add_registration(registration)
        self.tracker.add_registered_event(registration.event_id)
        logger.info(f"Registered {registration.email} for event {registration.event_id}")
        return registration

    def check_in(self, registration_id: int, notes: str = "") -> Optional[Dict]:
        """Record attendance for a registration"""
        registration = self.store.get_registration(registration_id)
        if registration is None:
            return None

        was_checked_in = registration.attendance_confirmed
        attendance = Attendance(
            event_id=registration.event_id,
            registration_id=registration.id,
            attendee_email=registration.email,
            notes=notes,
        )
        self.store.record_attendance(attendance)
        self.tracker.update_activity()

        if was_checked_in:
            logger.warning(f"Registration {registration_id} was already checked in")
        else:
            logger.info(f"Checked in registration {registration_id} for event {registration.event_id}")

        return {
            "attendance_id": attendance.id,
            "registration_id": registration.id,
            "event_id": registration.event_id,
            "attendee_email": registration.email,
            "was_already_checked_in": was_checked_in,
            "timestamp": attendance.check_in_time.isoformat(),
        }

    def check_out(self, attendance_id: int) -> Optional[Attendance]:
        """Mark an attendance record as checked out"""
        existing = self.store.get_attendance(attendance_id)
        if existing is None:
            return None

        updated = existing.model_copy(update={
            "check_out_time": self.store.clock(),
            "status": AttendanceStatus.CHECKED_OUT,
        })
        self.store.update_attendance(updated)
        self.tracker.update_activity()
        return updated

    def attendance_summary(self, event_id: int) -> Dict:
        """Registration and attendance counts for an event"""
        registrations = self.store.list_registrations_by_event(event_id)
        attendances = self.store.list_attendances_by_event(event_id)
        by_status = Counter(r.status for r in registrations)

        return {
            "event_id": event_id,
            "total_registrations": len(registrations),
            "registrations_by_status": {
                status.value: by_status.get(status, 0) for status in RegistrationStatus
            },
            "total_attendances": len(attendances),
            "checked_in": sum(1 for a in attendances if a.status == AttendanceStatus.CHECKED_IN),
            "checked_out": sum(1 for a in attendances if a.status == AttendanceStatus.CHECKED_OUT),
        }
