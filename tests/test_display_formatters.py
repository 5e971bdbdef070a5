"""
Tests for the one-line section summaries shown on collapsed booking-form sections.
"""

from __future__ import annotations

from datetime import date

from spacehive.application.utils.display_formatters import (
    format_budget,
    format_budget_range,
    format_date_time,
    format_guests,
    format_location,
    format_review_date,
    format_time_range,
)
from spacehive.domain.entities.booking_draft import (
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)


def _range(start: tuple[int, int, str], end: tuple[int, int, str]) -> TimeRange:
    return TimeRange(start=TimeOfDay(*start), end=TimeOfDay(*end))


def test_guests_golden_outputs():
    assert format_guests(GuestCounts(adults=2, children=1, infants=0)) == "2 Adults, 1 Child"
    assert format_guests(GuestCounts(adults=1, children=0, infants=0)) == "1 Adult"
    assert format_guests(GuestCounts(adults=1, children=2, infants=1)) == "1 Adult, 2 Children, 1 Infant"
    assert format_guests(GuestCounts(adults=3, children=0, infants=2)) == "3 Adults, 2 Infants"


def test_budget_golden_outputs():
    assert format_budget(BudgetRange(min=20, max=100)) == "$20 - 100 per hour"
    assert format_budget(BudgetRange(min=0, max=200)) == "$0 - 200 per hour"
    assert format_budget(BudgetRange(min=0, max=0)) == "No budget set"


def test_location_summary():
    assert format_location(LocationValue(value=None, is_flexible=True)) == "Flexible"
    assert format_location(LocationValue(value="Downtown, Calgary")) == "Downtown, Calgary"
    assert format_location(LocationValue()) == ""


def test_date_time_summary_combines_parts():
    dt = DateTimeValue(date=date(2025, 7, 4), time=_range((6, 0, "PM"), (10, 0, "PM")))
    assert format_date_time(dt) == "Jul 4, 6-10PM"


def test_date_time_summary_flexible_variants():
    both = DateTimeValue(is_date_flexible=True, is_time_flexible=True)
    assert format_date_time(both) == "Flexible"

    date_only_flexible = DateTimeValue(
        is_date_flexible=True, time=_range((6, 30, "AM"), (10, 15, "AM"))
    )
    assert format_date_time(date_only_flexible) == "Flexible date, 6:30-10:15AM"

    time_only_flexible = DateTimeValue(date=date(2025, 12, 25), is_time_flexible=True)
    assert format_date_time(time_only_flexible) == "Dec 25, Flexible time"


def test_date_time_summary_partial_and_empty():
    assert format_date_time(DateTimeValue()) == ""
    assert format_date_time(DateTimeValue(date=date(2025, 7, 4))) == "Jul 4"
    assert format_date_time(DateTimeValue(time=_range((11, 0, "AM"), (1, 0, "PM")))) == "11AM-1PM"


def test_formatters_do_not_mutate_input():
    guests = GuestCounts(adults=2, children=1)
    format_guests(guests)
    assert guests == GuestCounts(adults=2, children=1)


def test_review_screen_formats():
    assert format_review_date(date(2025, 7, 4)) == "Fri, Jul 4"
    assert format_review_date(None) == "Flexible"
    assert format_time_range(_range((6, 0, "PM"), (10, 0, "PM"))) == "06:00 PM - 10:00 PM"
    assert format_time_range(None) == "Flexible"
    assert format_budget_range(BudgetRange(min=20, max=100)) == "$20 - $100"
