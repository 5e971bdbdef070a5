from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from spacehive.application.exceptions import SessionNotFoundError, StepNotReadyError
from spacehive.application.ports.navigation import NavigationPort, Screen
from spacehive.application.ports.session_store import SessionStorePort
from spacehive.application.use_cases.booking_wizard import BookingFormWizard
from spacehive.application.utils.draft_codec import draft_to_payload
from spacehive.domain.entities.wizard_state import BookingFlow, WizardState

HANDOFF_SCREENS = {
    BookingFlow.instant_book: Screen.instant_booking,
    BookingFlow.match_request: Screen.match_request,
}


@dataclass(frozen=True)
class SubmitResult:
    screen: Screen
    payload: dict


class BookingFormUseCase:
    """Owns booking-form sessions: load state, apply a wizard transition, store it back."""

    def __init__(
        self,
        wizard: BookingFormWizard,
        store: SessionStorePort,
        navigator: NavigationPort,
    ) -> None:
        self._wizard = wizard
        self._store = store
        self._navigator = navigator
        self._logger = logging.getLogger(__name__)

    @property
    def wizard(self) -> BookingFormWizard:
        return self._wizard

    def start(self, flow: BookingFlow = BookingFlow.instant_book) -> tuple[str, WizardState]:
        state = self._wizard.start(flow)
        session_id = self._store.create(state)
        self._logger.info("Booking form opened", extra={"session_id": session_id, "flow": flow.value})
        return session_id, state

    def get(self, session_id: str) -> WizardState:
        state = self._store.get(session_id)
        if state is None:
            raise SessionNotFoundError(f"Unknown booking form session: {session_id}")
        return state

    def apply(self, session_id: str, transition: Callable[[WizardState], WizardState]) -> WizardState:
        state = self._store.update(session_id, transition)
        if state is None:
            raise SessionNotFoundError(f"Unknown booking form session: {session_id}")
        return state

    def submit(self, session_id: str) -> SubmitResult:
        state = self.get(session_id)
        if not self._wizard.can_submit(state):
            raise StepNotReadyError("Complete every section before searching.")

        screen = HANDOFF_SCREENS[state.flow]
        payload = {"form_data": draft_to_payload(state.draft)}
        self._navigator.navigate(screen, payload)
        self._store.discard(session_id)
        self._logger.info(
            "Booking form submitted",
            extra={"session_id": session_id, "screen": screen.value},
        )
        return SubmitResult(screen=screen, payload=payload)

    def close(self, session_id: str) -> None:
        if not self._store.discard(session_id):
            raise SessionNotFoundError(f"Unknown booking form session: {session_id}")
        self._navigator.navigate(Screen.home)
        self._logger.info("Booking form closed", extra={"session_id": session_id})
