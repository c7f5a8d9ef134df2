"""
EventEase tracker - composition root
Builds the record store, session tracker and check-in service
"""

import logging
from dataclasses import dataclass

from eventease.core.config import settings
from eventease.core.logging import setup_logging
from eventease.services.checkin_service import CheckInService
from eventease.services.record_store import RecordStore
from eventease.services.sample_data import seed_sample_data
from eventease.services.session_tracker import SessionTracker

logger = logging.getLogger(__name__)

@dataclass
class Tracker:
    """The services a presentation layer works with"""
    store: RecordStore
    sessions: SessionTracker
    checkin: CheckInService

def create_tracker(seed: bool = None) -> Tracker:
    """Create the services, seeding sample data when configured"""
    if seed is None:
        seed = settings.SEED_SAMPLE_DATA

    store = RecordStore()
    if seed:
        seed_sample_data(store)
        logger.info(
            f"Seeded {len(store.list_events())} events and "
            f"{len(store.list_registrations())} registrations"
        )

    sessions = SessionTracker()
    return Tracker(store=store, sessions=sessions, checkin=CheckInService(store, sessions))

if __name__ == "__main__":
    setup_logging()
    tracker = create_tracker()
    session = tracker.sessions.current_session
    logger.info(f"Session {session.session_id} active for {session.user_name}")
    for event in tracker.store.list_events():
        summary = tracker.checkin.attendance_summary(event.id)
        logger.info(
            f"#{event.id} {event.name} @ {event.location} on {event.date:%Y-%m-%d %H:%M} - "
            f"{summary['total_registrations']} registered, {summary['total_attendances']} checked in"
        )
