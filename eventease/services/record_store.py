"""
In-memory record store for events, registrations and attendance check-ins.

Single-writer only: ids are assigned as max existing id + 1, so two
interleaved inserts could compute the same id.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from eventease.models import Attendance, Event, Registration, RegistrationStatus

logger = logging.getLogger(__name__)


def next_id(records: Sequence) -> int:
    """Max existing id + 1, or 1 for an empty collection"""
    return max(record.id for record in records) + 1 if records else 1


def _find(records: List, record_id: int):
    return next((record for record in records if record.id == record_id), None)


def _replace(records: List, record) -> bool:
    """Swap in record at the slot holding the same id. False if absent."""
    for index, existing in enumerate(records):
        if existing.id == record.id:
            records[index] = record
            return True
    return False


class RecordStore:
    """Owns the event, registration and attendance collections"""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self._events: List[Event] = []
        self._registrations: List[Registration] = []
        self._attendances: List[Attendance] = []

    # -------- Events --------

    def list_events(self) -> List[Event]:
        return self._events

    def get_event(self, event_id: int) -> Optional[Event]:
        return _find(self._events, event_id)

    def add_event(self, event: Event) -> None:
        event.id = next_id(self._events)
        self._events.append(event)
        logger.debug(f"Added event {event.id} ({event.name})")

    def update_event(self, event: Event) -> None:
        if not _replace(self._events, event):
            logger.debug(f"Event {event.id} not found, update skipped")

    def delete_event(self, event_id: int) -> None:
        event = _find(self._events, event_id)
        if event is None:
            logger.debug(f"Event {event_id} not found, delete skipped")
            return
        # Registrations and attendances keep their event_id
        self._events.remove(event)
        logger.debug(f"Deleted event {event_id}")

    # -------- Registrations --------

    def list_registrations(self) -> List[Registration]:
        return self._registrations

    def list_registrations_by_event(self, event_id: int) -> List[Registration]:
        return [r for r in self._registrations if r.event_id == event_id]

    def get_registration(self, registration_id: int) -> Optional[Registration]:
        return _find(self._registrations, registration_id)

    def add_registration(self, registration: Registration) -> None:
        registration.id = next_id(self._registrations)
        registration.registered_date = self.clock()
        self._registrations.append(registration)
        logger.debug(f"Added registration {registration.id} for event {registration.event_id}")

    def update_registration(self, registration: Registration) -> None:
        """Replace the whole stored registration; status fields are not guarded."""
        if not _replace(self._registrations, registration):
            logger.debug(f"Registration {registration.id} not found, update skipped")

    def cancel_registration(self, registration_id: int) -> None:
        registration = _find(self._registrations, registration_id)
        if registration is None:
            logger.debug(f"Registration {registration_id} not found, cancel skipped")
            return
        registration.status = RegistrationStatus.CANCELLED
        logger.debug(f"Cancelled registration {registration_id}")

    # -------- Attendances --------

    def list_attendances(self) -> List[Attendance]:
        return self._attendances

    def list_attendances_by_event(self, event_id: int) -> List[Attendance]:
        return [a for a in self._attendances if a.event_id == event_id]

    def get_attendance(self, attendance_id: int) -> Optional[Attendance]:
        return _find(self._attendances, attendance_id)

    def record_attendance(self, attendance: Attendance) -> None:
        attendance.id = next_id(self._attendances)
        attendance.check_in_time = self.clock()
        self._attendances.append(attendance)

        registration = _find(self._registrations, attendance.registration_id)
        if registration is None:
            logger.debug(
                f"Attendance {attendance.id} references unknown registration "
                f"{attendance.registration_id}"
            )
            return
        registration.attendance_confirmed = True
        registration.status = RegistrationStatus.ATTENDED
        logger.debug(f"Recorded attendance {attendance.id} for registration {registration.id}")

    def update_attendance(self, attendance: Attendance) -> None:
        if not _replace(self._attendances, attendance):
            logger.debug(f"Attendance {attendance.id} not found, update skipped")
