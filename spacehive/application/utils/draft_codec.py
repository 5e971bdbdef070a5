from __future__ import annotations

from datetime import date, datetime
from typing import Any

from spacehive.application.utils.time_of_day import format_clock, parse_clock
from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)


def _serialize_time(tod: TimeOfDay) -> dict[str, str]:
    return {"time": format_clock(tod), "period": tod.period}


def _deserialize_time(data: dict[str, Any]) -> TimeOfDay:
    return parse_clock(str(data.get("time", "")), str(data.get("period", "AM")))


def _parse_iso_date(raw: Any) -> date | None:
    if not raw:
        return None
    if isinstance(raw, date):
        return raw
    # Accepts both "2025-07-04" and full timestamps like "2025-07-04T00:00:00.000Z"
    text = str(raw).replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])


def draft_to_payload(draft: BookingDraft) -> dict[str, Any]:
    """Serialize a draft for the navigation boundary (dates as ISO strings)."""
    dt = draft.date_time
    time_payload = None
    if dt.time is not None:
        time_payload = {"start": _serialize_time(dt.time.start), "end": _serialize_time(dt.time.end)}

    return {
        "location": {"value": draft.location.value, "is_flexible": draft.location.is_flexible},
        "date_time": {
            "date": dt.date.isoformat() if dt.date else None,
            "time": time_payload,
            "is_date_flexible": dt.is_date_flexible,
            "is_time_flexible": dt.is_time_flexible,
        },
        "guests": {
            "adults": draft.guests.adults,
            "children": draft.guests.children,
            "infants": draft.guests.infants,
        },
        "budget": {"min": draft.budget.min, "max": draft.budget.max},
    }


def draft_from_payload(data: dict[str, Any]) -> BookingDraft:
    """Inverse of draft_to_payload. Missing keys fall back to defaults."""
    location = data.get("location") or {}
    dt = data.get("date_time") or {}
    guests = data.get("guests") or {}
    budget = data.get("budget") or {}

    time_range = None
    if dt.get("time"):
        time_range = TimeRange(
            start=_deserialize_time(dt["time"].get("start") or {}),
            end=_deserialize_time(dt["time"].get("end") or {}),
        )

    defaults = BudgetRange()
    return BookingDraft(
        location=LocationValue(
            value=location.get("value"),
            is_flexible=bool(location.get("is_flexible", False)),
        ),
        date_time=DateTimeValue(
            date=_parse_iso_date(dt.get("date")),
            time=time_range,
            is_date_flexible=bool(dt.get("is_date_flexible", False)),
            is_time_flexible=bool(dt.get("is_time_flexible", False)),
        ),
        guests=GuestCounts(
            adults=int(guests.get("adults", 1)),
            children=int(guests.get("children", 0)),
            infants=int(guests.get("infants", 0)),
        ),
        budget=BudgetRange(
            min=int(budget.get("min", defaults.min)),
            max=int(budget.get("max", defaults.max)),
        ),
    )
