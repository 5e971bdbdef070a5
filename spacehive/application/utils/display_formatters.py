from __future__ import annotations

from datetime import date

from spacehive.domain.entities.booking_draft import (
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)

NONE_PLACEHOLDER = "None"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _short_clock(tod: TimeOfDay) -> str:
    if tod.minute == 0:
        return str(tod.hour)
    return f"{tod.hour}:{tod.minute:02d}"


def format_location(loc: LocationValue) -> str:
    if loc.is_flexible:
        return "Flexible"
    return loc.value or ""


def format_short_date(value: date) -> str:
    """Abbreviated month + day, e.g. "Jul 4"."""
    return f"{value.strftime('%b')} {value.day}"


def format_short_time_range(time: TimeRange) -> str:
    """Compact range, e.g. "6-10PM"; the start period only shows when it differs."""
    start = _short_clock(time.start)
    if time.start.period != time.end.period:
        start += time.start.period
    return f"{start}-{_short_clock(time.end)}{time.end.period}"


def format_date_time(dt: DateTimeValue) -> str:
    if dt.is_date_flexible and dt.is_time_flexible:
        return "Flexible"

    date_part = ""
    if dt.is_date_flexible:
        date_part = "Flexible date"
    elif dt.date is not None:
        date_part = format_short_date(dt.date)

    time_part = ""
    if dt.is_time_flexible:
        time_part = "Flexible time"
    elif dt.time is not None:
        time_part = format_short_time_range(dt.time)

    return ", ".join(part for part in (date_part, time_part) if part)


def format_guests(g: GuestCounts) -> str:
    text = _plural(g.adults, "Adult", "Adults")
    if g.children > 0:
        text += ", " + _plural(g.children, "Child", "Children")
    if g.infants > 0:
        text += ", " + _plural(g.infants, "Infant", "Infants")
    return text


def format_budget(b: BudgetRange) -> str:
    if b.min == 0 and b.max == 0:
        return "No budget set"
    return f"${b.min} - {b.max} per hour"


# Review screen variants


def format_review_date(value: date | None) -> str:
    if value is None:
        return "Flexible"
    return f"{value.strftime('%a')}, {format_short_date(value)}"


def format_time_range(time: TimeRange | None) -> str:
    if time is None:
        return "Flexible"
    start, end = time.start, time.end
    return (
        f"{start.hour:02d}:{start.minute:02d} {start.period} - "
        f"{end.hour:02d}:{end.minute:02d} {end.period}"
    )


def format_budget_range(b: BudgetRange) -> str:
    return f"${b.min} - ${b.max}"
