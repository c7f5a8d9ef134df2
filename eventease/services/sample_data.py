"""
Sample events and registrations for a fresh store
"""

from datetime import datetime, timedelta

from eventease.models import Event, Registration, RegistrationStatus
from eventease.services.record_store import RecordStore

SAMPLE_EVENTS = [
    {
        "name": "Tech Conference 2025",
        "date": datetime(2025, 3, 15, 9, 0, 0),
        "location": "San Francisco Convention Center",
        "description": "Annual technology conference featuring the latest innovations",
    },
    {
        "name": "Music Festival",
        "date": datetime(2025, 6, 20, 18, 0, 0),
        "location": "Central Park, New York",
        "description": "Three-day music festival with international artists",
    },
    {
        "name": "Food & Wine Expo",
        "date": datetime(2025, 4, 10, 12, 0, 0),
        "location": "Chicago Food Hall",
        "description": "Culinary experience with local and international cuisine",
    },
]

SAMPLE_REGISTRATIONS = [
    {"event_id": 1, "name": "John Smith", "email": "john.smith@email.com", "contact_number": "555-0101", "days_ago": 5},
    {"event_id": 1, "name": "Sarah Johnson", "email": "sarah.j@email.com", "contact_number": "555-0102", "days_ago": 4},
]

def seed_sample_data(store: RecordStore) -> None:
    """Load the sample events and confirmed registrations into store"""
    for data in SAMPLE_EVENTS:
        store.add_event(Event(**data))

    for data in SAMPLE_REGISTRATIONS:
        registration = Registration(
            event_id=data["event_id"],
            name=data["name"],
            email=data["email"],
            contact_number=data["contact_number"],
        )
        store.add_registration(registration)
        # add_registration stamps the current time; backdate like a real signup
        registration.registered_date = registration.registered_date - timedelta(days=data["days_ago"])
        registration.status = RegistrationStatus.CONFIRMED
