from __future__ import annotations

import threading
import uuid
from typing import Any, Callable

from spacehive.application.ports.session_store import SessionStorePort
from spacehive.domain.entities.instant_booking import InstantBookingSession
from spacehive.domain.entities.match_request import MatchRequestState
from spacehive.domain.entities.wizard_state import WizardState


class MemorySessionStore(SessionStorePort):
    """Process-local sessions. Nothing survives a restart."""

    def __init__(self, session_limit: int = 1000) -> None:
        self._forms: dict[str, WizardState] = {}
        self._match_requests: dict[str, MatchRequestState] = {}
        self._instant_bookings: dict[str, InstantBookingSession] = {}
        self._session_limit = session_limit
        self._lock = threading.Lock()  # sync endpoints run in a thread pool
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict

    def _new_id(self) -> str:
        return uuid.uuid4().hex

    def _get_lock(self, session_id: str) -> threading.Lock:
        """Get or create the read-modify-write lock for a session id."""
        with self._lock_lock:
            if session_id not in self._locks:
                self._locks[session_id] = threading.Lock()
            return self._locks[session_id]

    def _drop_lock(self, session_id: str) -> None:
        with self._lock_lock:
            self._locks.pop(session_id, None)

    def _trim(self, sessions: dict) -> None:
        # Oldest first: dicts keep insertion order
        while len(sessions) > self._session_limit:
            oldest = next(iter(sessions))
            sessions.pop(oldest)
            self._drop_lock(oldest)

    def _create(self, sessions: dict[str, Any], state: Any) -> str:
        session_id = self._new_id()
        with self._lock:
            sessions[session_id] = state
            self._trim(sessions)
        return session_id

    def _get(self, sessions: dict[str, Any], session_id: str) -> Any:
        with self._lock:
            return sessions.get(session_id)

    def _put(self, sessions: dict[str, Any], session_id: str, state: Any) -> None:
        with self._lock:
            sessions[session_id] = state

    def _update(self, sessions: dict[str, Any], session_id: str, fn: Callable[[Any], Any]) -> Any:
        with self._get_lock(session_id):
            state = self._get(sessions, session_id)
            if state is None:
                self._drop_lock(session_id)
                return None
            state = fn(state)
            with self._lock:
                # Discarded while fn ran: do not resurrect it
                if session_id not in sessions:
                    return None
                sessions[session_id] = state
            return state

    def _discard(self, sessions: dict[str, Any], session_id: str) -> bool:
        with self._lock:
            existed = sessions.pop(session_id, None) is not None
        self._drop_lock(session_id)
        return existed

    # Booking form

    def create(self, state: WizardState) -> str:
        return self._create(self._forms, state)

    def get(self, session_id: str) -> WizardState | None:
        return self._get(self._forms, session_id)

    def put(self, session_id: str, state: WizardState) -> None:
        self._put(self._forms, session_id, state)

    def update(self, session_id: str, fn: Callable[[WizardState], WizardState]) -> WizardState | None:
        return self._update(self._forms, session_id, fn)

    def discard(self, session_id: str) -> bool:
        return self._discard(self._forms, session_id)

    # Match requests

    def create_match_request(self, state: MatchRequestState) -> str:
        return self._create(self._match_requests, state)

    def get_match_request(self, request_id: str) -> MatchRequestState | None:
        return self._get(self._match_requests, request_id)

    def update_match_request(
        self, request_id: str, fn: Callable[[MatchRequestState], MatchRequestState]
    ) -> MatchRequestState | None:
        return self._update(self._match_requests, request_id, fn)

    def discard_match_request(self, request_id: str) -> bool:
        return self._discard(self._match_requests, request_id)

    # Instant booking

    def create_instant_booking(self, session: InstantBookingSession) -> str:
        return self._create(self._instant_bookings, session)

    def get_instant_booking(self, session_id: str) -> InstantBookingSession | None:
        return self._get(self._instant_bookings, session_id)

    def update_instant_booking(
        self, session_id: str, fn: Callable[[InstantBookingSession], InstantBookingSession]
    ) -> InstantBookingSession | None:
        return self._update(self._instant_bookings, session_id, fn)

    def discard_instant_booking(self, session_id: str) -> bool:
        return self._discard(self._instant_bookings, session_id)
