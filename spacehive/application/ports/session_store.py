from abc import ABC, abstractmethod
from typing import Callable

from spacehive.domain.entities.instant_booking import InstantBookingSession
from spacehive.domain.entities.match_request import MatchRequestState
from spacehive.domain.entities.wizard_state import WizardState


class SessionStorePort(ABC):
    @abstractmethod
    def create(self, state: WizardState) -> str:
        """Store a fresh booking-form session. Returns the new session id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> WizardState | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, session_id: str, state: WizardState) -> None:
        raise NotImplementedError

    @abstractmethod
    def update(
        self, session_id: str, fn: Callable[[WizardState], WizardState]
    ) -> WizardState | None:
        """
        Read-modify-write under the session's lock.
        Returns None (and skips fn) if the session does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> bool:
        """Drop a session. Returns False if it did not exist."""
        raise NotImplementedError

    @abstractmethod
    def create_match_request(self, state: MatchRequestState) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_match_request(self, request_id: str) -> MatchRequestState | None:
        raise NotImplementedError

    @abstractmethod
    def update_match_request(
        self, request_id: str, fn: Callable[[MatchRequestState], MatchRequestState]
    ) -> MatchRequestState | None:
        raise NotImplementedError

    @abstractmethod
    def discard_match_request(self, request_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def create_instant_booking(self, session: InstantBookingSession) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_instant_booking(self, session_id: str) -> InstantBookingSession | None:
        raise NotImplementedError

    @abstractmethod
    def update_instant_booking(
        self, session_id: str, fn: Callable[[InstantBookingSession], InstantBookingSession]
    ) -> InstantBookingSession | None:
        raise NotImplementedError

    @abstractmethod
    def discard_instant_booking(self, session_id: str) -> bool:
        raise NotImplementedError
