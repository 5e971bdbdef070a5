from __future__ import annotations

from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
)


def is_location_complete(loc: LocationValue) -> bool:
    return loc.value is not None or loc.is_flexible


def is_date_time_complete(dt: DateTimeValue) -> bool:
    has_date = dt.date is not None or dt.is_date_flexible
    has_time = dt.time is not None or dt.is_time_flexible
    return has_date and has_time


def is_guests_complete(g: GuestCounts) -> bool:
    return g.adults >= 1


def is_budget_complete(b: BudgetRange) -> bool:
    return b.min >= 0 and b.max >= 0 and b.min <= b.max


def all_complete(draft: BookingDraft) -> bool:
    return (
        is_location_complete(draft.location)
        and is_date_time_complete(draft.date_time)
        and is_guests_complete(draft.guests)
        and is_budget_complete(draft.budget)
    )
