"""
Per-user session tracking: recent events, data bag and idle timeout
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from eventease.core.config import settings
from eventease.models import SessionValue, UserSession

logger = logging.getLogger(__name__)

class SessionTracker:
    """Tracks one user's session.

    The caller owns the tracker and passes it where it is needed; there is
    no process-wide session. A session goes from active to inactive via
    end_session() and is never reactivated: the next current_session access
    replaces it with a fresh guest session.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._session: Optional[UserSession] = None

    @property
    def current_session(self) -> UserSession:
        """Active session, creating a guest one if needed"""
        if self._session is None or not self._session.is_active:
            self.initialize_session(settings.GUEST_USER_NAME, settings.GUEST_USER_EMAIL)
        return self._session

    def initialize_session(self, user_name: str, user_email: str) -> None:
        now = self._clock()
        self._session = UserSession(
            user_name=user_name,
            user_email=user_email,
            session_start_time=now,
            last_activity_time=now,
            is_active=True,
        )
        logger.info(f"Started session {self._session.session_id} for {user_name}")

    def update_activity(self) -> None:
        if self._session is not None and self._session.is_active:
            self._session.last_activity_time = self._clock()

    def add_viewed_event(self, event_id: int) -> None:
        if self._session is not None and event_id not in self._session.viewed_events:
            self._session.viewed_events.append(event_id)
            self.update_activity()

    def add_registered_event(self, event_id: int) -> None:
        if self._session is not None and event_id not in self._session.registered_events:
            self._session.registered_events.append(event_id)
            self.update_activity()

    def set_session_data(self, key: str, value: Any) -> None:
        """Store value under key.

        Writes even when the session has ended; only the activity refresh
        is skipped in that case.
        """
        if self._session is None:
            return
        self._session.session_data[key] = SessionValue.wrap(value)
        self.update_activity()

    def get_session_data(self, key: str, expected_type: Optional[type] = None) -> Any:
        """Value stored under key, or None.

        Raises SessionDataTypeError when the stored value is not of
        expected_type.
        """
        if self._session is None:
            return None
        stored = self._session.session_data.get(key)
        if stored is None:
            return None
        return stored.unwrap(key, expected_type)

    def end_session(self) -> None:
        if self._session is not None:
            self._session.is_active = False
            logger.info(f"Ended session {self._session.session_id}")

    def get_session_duration(self) -> timedelta:
        if self._session is None:
            return timedelta(0)
        return self._clock() - self._session.session_start_time

    def is_session_expired(self, timeout_minutes: int = None) -> bool:
        if timeout_minutes is None:
            timeout_minutes = settings.SESSION_TIMEOUT_MINUTES
        if self._session is None:
            return True
        inactive = self._clock() - self._session.last_activity_time
        return inactive.total_seconds() / 60 > timeout_minutes
