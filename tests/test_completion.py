from __future__ import annotations

from datetime import date

from spacehive.application.utils.completion import (
    all_complete,
    is_budget_complete,
    is_date_time_complete,
    is_guests_complete,
    is_location_complete,
)
from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)


def test_location_needs_value_or_flexibility():
    assert is_location_complete(LocationValue(value=None, is_flexible=False)) is False
    assert is_location_complete(LocationValue(value=None, is_flexible=True)) is True
    assert is_location_complete(LocationValue(value="Inglewood, Calgary")) is True


def test_date_time_needs_both_parts_resolved():
    assert is_date_time_complete(
        DateTimeValue(date=None, time=None, is_date_flexible=True, is_time_flexible=True)
    ) is True
    assert is_date_time_complete(
        DateTimeValue(date=date(2025, 7, 4), time=None, is_date_flexible=False, is_time_flexible=False)
    ) is False

    time_range = TimeRange(start=TimeOfDay(6, 0, "PM"), end=TimeOfDay(10, 0, "PM"))
    assert is_date_time_complete(DateTimeValue(date=date(2025, 7, 4), time=time_range)) is True
    assert is_date_time_complete(DateTimeValue(time=time_range)) is False


def test_guests_need_an_adult():
    assert is_guests_complete(GuestCounts()) is True
    assert is_guests_complete(GuestCounts(adults=0, children=2)) is False


def test_budget_needs_ordered_bounds():
    assert is_budget_complete(BudgetRange(min=50, max=30)) is False
    assert is_budget_complete(BudgetRange(min=0, max=200)) is True
    assert is_budget_complete(BudgetRange(min=40, max=40)) is True


def test_default_draft_is_incomplete_until_location_and_date_time_set():
    draft = BookingDraft()
    assert all_complete(draft) is False

    draft = BookingDraft(
        location=LocationValue(is_flexible=True),
        date_time=DateTimeValue(is_date_flexible=True, is_time_flexible=True),
    )
    assert all_complete(draft) is True
