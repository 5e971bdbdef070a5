from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from spacehive.application.exceptions import SessionNotFoundError, StepNotReadyError
from spacehive.application.ports.navigation import NavigationPort, Screen
from spacehive.application.ports.session_store import SessionStorePort
from spacehive.application.utils.display_formatters import (
    format_budget_range,
    format_review_date,
    format_time_range,
)
from spacehive.application.utils.draft_codec import draft_to_payload
from spacehive.domain.entities.booking_draft import BookingDraft
from spacehive.domain.entities.match_request import MatchRequestData, MatchRequestState, MatchStep

EVENT_TYPES = ("Birthday Party", "Workshop", "Hobby Club", "Meeting", "Pop-up")

FEATURES = ("Soundproof", "Pet-friendly", "Kitchen Access", "Outdoor Space", "AV Equipment", "Parking")

VIBES = {
    "modern-minimal": "Modern & Minimal",
    "cozy-warm": "Cozy & Warm",
    "bold-colorful": "Bold & Colorful",
    "outdoorsy-natural": "Outdoorsy & Natural",
}

FLEXIBILITY_OPTIONS = {
    "open-to-suggestions": "Open to suggestions",
    "slightly-flexible": "Slightly flexible",
    "not-flexible": "Not flexible at all",
}

EXTRAS = ("Photographer", "String Lights Setup", "Decor Packages", "Catering")

TIMELINES = {
    "same-day": "Same day",
    "within-2-days": "Within 2 business days",
    "within-week": "Within a week",
    "no-rush": "No rush, anytime works",
}

NOT_SPECIFIED = "Not specified"

_REQUIRED_STEPS = {
    MatchStep.event_type: "event_type",
    MatchStep.vibe: "vibe",
    MatchStep.flexibility: "flexibility",
}


def is_step_valid(state: MatchRequestState) -> bool:
    """Event type, vibe and flexibility need a choice; every other step is optional."""
    field_name = _REQUIRED_STEPS.get(state.step)
    if field_name is None:
        return True
    return getattr(state.data, field_name) is not None


def button_text(state: MatchRequestState) -> str:
    if state.step == MatchStep.notes:
        return "Review"
    if state.step == MatchStep.review:
        return "Send Request"
    return "Next"


def _toggle(items: tuple[str, ...], item: str) -> tuple[str, ...]:
    if item in items:
        return tuple(i for i in items if i != item)
    return items + (item,)


def _format_review_guests(draft: BookingDraft) -> str:
    g = draft.guests
    parts = []
    if g.adults > 0:
        parts.append(f"{g.adults} Adult{'s' if g.adults > 1 else ''}")
    if g.children > 0:
        parts.append(f"{g.children} Child{'ren' if g.children > 1 else ''}")
    if g.infants > 0:
        parts.append(f"{g.infants} Infant{'s' if g.infants > 1 else ''}")
    return ", ".join(parts)


def review_summary(state: MatchRequestState) -> dict[str, dict[str, str]]:
    draft, data = state.draft, state.data
    return {
        "booking": {
            "Location": "Flexible" if draft.location.is_flexible else (draft.location.value or NOT_SPECIFIED),
            "Date": format_review_date(draft.date_time.date),
            "Time": format_time_range(draft.date_time.time),
            "Guests": _format_review_guests(draft),
            "Budget": format_budget_range(draft.budget),
        },
        "preferences": {
            "Event type": data.event_type or NOT_SPECIFIED,
            "Features": ", ".join(data.features) or NOT_SPECIFIED,
            "Vibe": VIBES.get(data.vibe, data.vibe) if data.vibe else NOT_SPECIFIED,
            "Flexibility": (
                FLEXIBILITY_OPTIONS.get(data.flexibility, data.flexibility) if data.flexibility else NOT_SPECIFIED
            ),
            "Extras": ", ".join(data.extras) or NOT_SPECIFIED,
            "Timeline": TIMELINES.get(data.timeline, data.timeline) if data.timeline else NOT_SPECIFIED,
            "Notes": data.notes or NOT_SPECIFIED,
        },
    }


class MatchRequestUseCase:
    def __init__(
        self,
        store: SessionStorePort,
        navigator: NavigationPort,
        notes_max_length: int = 500,
    ) -> None:
        self._store = store
        self._navigator = navigator
        self._notes_max_length = notes_max_length
        self._logger = logging.getLogger(__name__)

    def start(self, draft: BookingDraft) -> tuple[str, MatchRequestState]:
        state = MatchRequestState(draft=draft)
        request_id = self._store.create_match_request(state)
        self._logger.info("Match request started", extra={"session_id": request_id})
        return request_id, state

    def get(self, request_id: str) -> MatchRequestState:
        state = self._store.get_match_request(request_id)
        if state is None:
            raise SessionNotFoundError(f"Unknown match request: {request_id}")
        return state

    def _modify(
        self, request_id: str, fn: Callable[[MatchRequestState], MatchRequestState]
    ) -> MatchRequestState:
        state = self._store.update_match_request(request_id, fn)
        if state is None:
            raise SessionNotFoundError(f"Unknown match request: {request_id}")
        return state

    def update(self, request_id: str, changes: dict[str, Any]) -> MatchRequestState:
        """
        Merge step answers into the request.
        Single-choice fields must name a known option; notes are truncated
        to the configured maximum.
        """
        updates: dict[str, Any] = {}

        if "event_type" in changes:
            updates["event_type"] = _choice(changes["event_type"], EVENT_TYPES, "event type")
        if "vibe" in changes:
            updates["vibe"] = _choice(changes["vibe"], VIBES, "vibe")
        if "flexibility" in changes:
            updates["flexibility"] = _choice(changes["flexibility"], FLEXIBILITY_OPTIONS, "flexibility")
        if "timeline" in changes:
            updates["timeline"] = _choice(changes["timeline"], TIMELINES, "timeline")
        if "features" in changes:
            updates["features"] = _subset(changes["features"], FEATURES, "feature")
        if "extras" in changes:
            updates["extras"] = _subset(changes["extras"], EXTRAS, "extra")
        if "notes" in changes:
            updates["notes"] = str(changes["notes"] or "")[: self._notes_max_length]

        return self._modify(request_id, lambda s: replace(s, data=replace(s.data, **updates)))

    def toggle_feature(self, request_id: str, feature: str) -> MatchRequestState:
        _choice(feature, FEATURES, "feature")
        return self._modify(
            request_id,
            lambda s: replace(s, data=replace(s.data, features=_toggle(s.data.features, feature))),
        )

    def toggle_extra(self, request_id: str, extra: str) -> MatchRequestState:
        _choice(extra, EXTRAS, "extra")
        return self._modify(
            request_id,
            lambda s: replace(s, data=replace(s.data, extras=_toggle(s.data.extras, extra))),
        )

    def next_step(self, request_id: str) -> MatchRequestState:
        def advance(state: MatchRequestState) -> MatchRequestState:
            if not is_step_valid(state):
                raise StepNotReadyError(f"Step {state.step.name} needs an answer before continuing.")
            if state.step == MatchStep.review:
                return state
            return replace(state, step=MatchStep(state.step + 1))

        return self._modify(request_id, advance)

    def previous_step(self, request_id: str) -> MatchRequestState:
        """Step back; from the first step this returns to the booking form."""
        state = self.get(request_id)
        if state.step == MatchStep.event_type:
            self._navigator.go_back()
            return state
        return self._modify(
            request_id, lambda s: replace(s, step=MatchStep(max(s.step - 1, MatchStep.event_type)))
        )

    def send_request(self, request_id: str) -> MatchRequestState:
        def mark_sent(state: MatchRequestState) -> MatchRequestState:
            if state.step != MatchStep.review:
                raise StepNotReadyError("Review the request before sending it.")
            return replace(state, sent=True)

        state = self._modify(request_id, mark_sent)
        self._logger.info(
            "Sending match request",
            extra={
                "session_id": request_id,
                "event_type": state.data.event_type,
                "vibe": state.data.vibe,
            },
        )
        return state

    def switch_to_instant_book(self, request_id: str) -> dict[str, Any]:
        state = self.get(request_id)
        payload = {"form_data": draft_to_payload(state.draft)}
        self._navigator.navigate(Screen.instant_booking, payload)
        return payload

    def close(self, request_id: str) -> None:
        if not self._store.discard_match_request(request_id):
            raise SessionNotFoundError(f"Unknown match request: {request_id}")
        self._navigator.navigate(Screen.home)


def _choice(value: Any, options: Any, label: str) -> str | None:
    if value is None:
        return None
    if value not in options:
        raise ValueError(f"Unknown {label}: {value!r}")
    return value


def _subset(values: Any, options: tuple[str, ...], label: str) -> tuple[str, ...]:
    result: list[str] = []
    for value in values or ():
        _choice(value, options, label)
        if value not in result:
            result.append(value)
    return tuple(result)
