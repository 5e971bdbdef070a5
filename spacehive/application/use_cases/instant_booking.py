from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from spacehive.application.exceptions import SessionNotFoundError, VenueNotFoundError
from spacehive.application.ports.debouncer import DebouncerPort
from spacehive.application.ports.navigation import NavigationPort, Screen
from spacehive.application.ports.session_store import SessionStorePort
from spacehive.application.ports.venue_catalog import VenueCatalogPort
from spacehive.application.utils.draft_codec import draft_to_payload
from spacehive.application.utils.time_of_day import booking_hours
from spacehive.domain.entities.booking_draft import BookingDraft
from spacehive.domain.entities.instant_booking import InstantBookingSession
from spacehive.domain.entities.venue import PriceQuote, Venue

EXTRA_SERVICES = {
    "photographer": "Photographer",
    "string_lights": "String Lights Setup",
    "decor_packages": "Decor Packages",
    "catering": "Catering",
}

PHOTOGRAPHER_HOURLY_RATE = 50
FLAT_EXTRA_COSTS = {"string_lights": 15, "decor_packages": 10, "catering": 0}


def extra_services_cost(extra_services: tuple[str, ...], hours: int) -> int:
    total = 0
    for service in extra_services:
        if service == "photographer":
            total += PHOTOGRAPHER_HOURLY_RATE * hours
        else:
            total += FLAT_EXTRA_COSTS.get(service, 0)
    return total


def review_action_label(event_type: str | None) -> str:
    return "Next" if event_type else "Skip"


class InstantBookingUseCase:
    """Venue search, map selection and the price review before payment."""

    def __init__(
        self,
        catalog: VenueCatalogPort,
        store: SessionStorePort,
        navigator: NavigationPort,
        debouncer: DebouncerPort,
        default_hours: int = 4,
        min_hours: int = 2,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._navigator = navigator
        self._debouncer = debouncer
        self._default_hours = default_hours
        self._min_hours = min_hours
        self._logger = logging.getLogger(__name__)

    def search(self, draft: BookingDraft) -> list[Venue]:
        """Venues priced inside the draft's hourly budget, cheapest first."""
        budget = draft.budget
        matches = [v for v in self._catalog.list_venues() if budget.min <= v.price <= budget.max]
        return sorted(matches, key=lambda v: (v.price, v.id))

    def get_venue(self, venue_id: int) -> Venue:
        venue = self._catalog.get_venue(venue_id)
        if venue is None:
            raise VenueNotFoundError(f"Unknown venue: {venue_id}")
        return venue

    # Map sessions

    def start(self, draft: BookingDraft) -> tuple[str, InstantBookingSession]:
        session = InstantBookingSession(draft=draft)
        session_id = self._store.create_instant_booking(session)
        self._logger.info("Instant booking opened", extra={"session_id": session_id})
        return session_id, session

    def get(self, session_id: str) -> InstantBookingSession:
        session = self._store.get_instant_booking(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown instant booking session: {session_id}")
        return session

    def press_marker(self, session_id: str, venue_id: int) -> None:
        """Map marker taps are debounced; only the last tap in a burst selects."""
        self.get(session_id)
        self.get_venue(venue_id)
        self._debouncer.call(session_id, self._select, session_id, venue_id)

    def press_card(self, session_id: str, venue_id: int) -> InstantBookingSession:
        """Card taps select immediately and supersede a pending marker tap."""
        self.get_venue(venue_id)
        self._debouncer.cancel(session_id)
        session = self._select(session_id, venue_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown instant booking session: {session_id}")
        return session

    def settle(self, session_id: str) -> InstantBookingSession:
        """Apply a pending marker tap now instead of waiting out the delay."""
        self._debouncer.flush(session_id)
        return self.get(session_id)

    def selected_venue_id(self, session_id: str) -> int | None:
        return self.get(session_id).selected_venue_id

    def _select(self, session_id: str, venue_id: int) -> InstantBookingSession | None:
        session = self._store.update_instant_booking(
            session_id, lambda s: replace(s, selected_venue_id=venue_id)
        )
        self._logger.debug("Venue selected", extra={"session_id": session_id, "venue_id": venue_id})
        return session

    def close(self, session_id: str) -> None:
        self._debouncer.cancel(session_id)
        if not self._store.discard_instant_booking(session_id):
            raise SessionNotFoundError(f"Unknown instant booking session: {session_id}")

    def hours_for(self, draft: BookingDraft) -> int:
        return booking_hours(draft.date_time, self._default_hours, self._min_hours)

    def quote(
        self,
        venue_id: int,
        draft: BookingDraft,
        extra_services: tuple[str, ...] = (),
        event_type: str | None = None,
    ) -> PriceQuote:
        venue = self.get_venue(venue_id)
        unknown = [s for s in extra_services if s not in EXTRA_SERVICES]
        if unknown:
            raise ValueError(f"Unknown extra services: {', '.join(unknown)}")

        hours = self.hours_for(draft)
        base_price = venue.price * hours
        extras_cost = extra_services_cost(extra_services, hours)
        return PriceQuote(
            venue_id=venue.id,
            hours=hours,
            base_price=base_price,
            extra_services_cost=extras_cost,
            total_price=base_price + extras_cost,
            extra_services=tuple(extra_services),
            event_type=event_type,
        )

    def proceed_to_payment(
        self,
        venue_id: int,
        draft: BookingDraft,
        event_type: str | None = None,
        extra_services: tuple[str, ...] = (),
    ) -> dict[str, Any]:
        """
        Leave the review screen. Without an event type the action is "Skip"
        and the custom details are dropped.
        """
        if not event_type:
            extra_services = ()
        quote = self.quote(venue_id, draft, extra_services, event_type)
        payload = {
            "venue_id": venue_id,
            "form_data": draft_to_payload(draft),
            "custom_details": {"event_type": event_type, "extra_services": list(quote.extra_services)},
            "total_price": quote.total_price,
        }
        self._navigator.navigate(Screen.instant_booking_payment, payload)
        self._logger.info(
            "Instant booking review finished",
            extra={"venue_id": venue_id, "action": review_action_label(event_type)},
        )
        return payload

    def switch_to_match_request(self, draft: BookingDraft) -> dict[str, Any]:
        payload = {"form_data": draft_to_payload(draft)}
        self._navigator.navigate(Screen.match_request, payload)
        return payload
