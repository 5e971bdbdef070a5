"""
Tests for venue search, marker selection and the price review.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from spacehive.application.exceptions import SessionNotFoundError, VenueNotFoundError
from spacehive.application.ports.debouncer import DebouncerPort
from spacehive.application.ports.navigation import Screen
from spacehive.application.use_cases.instant_booking import InstantBookingUseCase, review_action_label
from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    TimeOfDay,
    TimeRange,
)
from spacehive.infrastructure.catalog.mock_catalog import MockVenueCatalog
from spacehive.infrastructure.navigation.recording_navigator import RecordingNavigator
from spacehive.infrastructure.store.memory_store import MemorySessionStore


class ManualDebouncer(DebouncerPort):
    """Holds pending calls until flush() so tests control the clock."""

    def __init__(self) -> None:
        self.pending: dict[str, tuple[Callable[..., Any], tuple[Any, ...]]] = {}

    def call(self, key, fn, *args):
        self.pending[key] = (fn, args)

    def cancel(self, key):
        self.pending.pop(key, None)

    def flush(self, key):
        if key not in self.pending:
            return False
        fn, args = self.pending.pop(key)
        fn(*args)
        return True


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def debouncer() -> ManualDebouncer:
    return ManualDebouncer()


@pytest.fixture
def use_case(navigator, debouncer) -> InstantBookingUseCase:
    return InstantBookingUseCase(
        MockVenueCatalog(), MemorySessionStore(), navigator, debouncer, default_hours=4, min_hours=2
    )


def _evening_draft() -> BookingDraft:
    evening = TimeRange(start=TimeOfDay(6, 0, "PM"), end=TimeOfDay(10, 0, "PM"))
    return BookingDraft(date_time=DateTimeValue(time=evening))


def test_search_sorts_by_price(use_case):
    venues = use_case.search(BookingDraft())
    assert [v.id for v in venues] == [3, 2, 1]
    assert [v.price for v in venues] == [22, 25, 30]


def test_search_filters_by_budget(use_case):
    draft = BookingDraft(budget=BudgetRange(min=23, max=28))
    assert [v.id for v in use_case.search(draft)] == [2]
    assert use_case.search(BookingDraft(budget=BudgetRange(min=0, max=10))) == []


def test_quote_with_extras(use_case):
    quote = use_case.quote(1, _evening_draft(), ("photographer", "string_lights"), "Workshop")
    assert quote.hours == 4
    assert quote.base_price == 120
    assert quote.extra_services_cost == 200 + 15
    assert quote.total_price == 335


def test_quote_without_time_uses_default_hours(use_case):
    quote = use_case.quote(3, BookingDraft())
    assert quote.hours == 4
    assert quote.total_price == 88


def test_quote_rejects_unknown_input(use_case):
    with pytest.raises(VenueNotFoundError):
        use_case.quote(99, BookingDraft())
    with pytest.raises(ValueError):
        use_case.quote(1, BookingDraft(), ("fireworks",))


def test_marker_presses_are_debounced(use_case, debouncer):
    session_id, _ = use_case.start(BookingDraft())
    use_case.press_marker(session_id, 1)
    use_case.press_marker(session_id, 2)
    assert use_case.selected_venue_id(session_id) is None

    assert debouncer.flush(session_id) is True
    assert use_case.selected_venue_id(session_id) == 2


def test_card_press_supersedes_pending_marker(use_case, debouncer):
    session_id, _ = use_case.start(BookingDraft())
    use_case.press_marker(session_id, 1)
    session = use_case.press_card(session_id, 3)
    assert session.selected_venue_id == 3
    assert debouncer.flush(session_id) is False
    assert use_case.selected_venue_id(session_id) == 3


def test_selection_is_per_session(use_case):
    first, _ = use_case.start(BookingDraft())
    second, _ = use_case.start(BookingDraft())

    use_case.press_card(first, 1)
    use_case.press_marker(second, 2)
    assert use_case.settle(second).selected_venue_id == 2

    assert use_case.selected_venue_id(first) == 1
    assert use_case.selected_venue_id(second) == 2


def test_press_unknown_venue_or_session(use_case):
    session_id, _ = use_case.start(BookingDraft())
    with pytest.raises(VenueNotFoundError):
        use_case.press_marker(session_id, 42)
    with pytest.raises(SessionNotFoundError):
        use_case.press_card("missing", 1)


def test_close_drops_pending_marker(use_case, debouncer):
    session_id, _ = use_case.start(BookingDraft())
    use_case.press_marker(session_id, 1)
    use_case.close(session_id)

    assert debouncer.pending == {}
    with pytest.raises(SessionNotFoundError):
        use_case.get(session_id)


def test_skip_drops_custom_details(use_case, navigator):
    payload = use_case.proceed_to_payment(2, _evening_draft(), None, ("photographer",))

    assert payload["custom_details"] == {"event_type": None, "extra_services": []}
    assert payload["total_price"] == 100
    screen, params = navigator.current
    assert screen is Screen.instant_booking_payment
    assert params["venue_id"] == 2


def test_next_keeps_custom_details(use_case):
    payload = use_case.proceed_to_payment(2, _evening_draft(), "Meeting", ("catering",))
    assert payload["custom_details"] == {"event_type": "Meeting", "extra_services": ["catering"]}
    assert payload["total_price"] == 100


def test_review_action_label():
    assert review_action_label(None) == "Skip"
    assert review_action_label("") == "Skip"
    assert review_action_label("Pop-up") == "Next"


def test_switch_to_match_request(use_case, navigator):
    use_case.switch_to_match_request(BookingDraft())
    assert navigator.current[0] is Screen.match_request
