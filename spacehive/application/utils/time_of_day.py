from __future__ import annotations

import re

from spacehive.domain.entities.booking_draft import DateTimeValue, TimeOfDay, TimeRange

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def to_minutes(tod: TimeOfDay) -> int:
    """Minutes since midnight for a 12-hour clock value."""
    hour = tod.hour
    if tod.period == "AM" and hour == 12:
        hour = 0
    if tod.period == "PM" and hour != 12:
        hour += 12
    return hour * 60 + tod.minute


def to_24h_hour(tod: TimeOfDay) -> int:
    return to_minutes(tod) // 60


def add_15_minutes(tod: TimeOfDay) -> TimeOfDay:
    """
    Step a time forward by one quarter hour.
    11:45 AM -> 12:00 PM, 11:45 PM -> 12:00 AM, 12:45 -> 1:00 (same period).
    """
    hour, minute, period = tod.hour, tod.minute + 15, tod.period
    if minute >= 60:
        minute = 0
        hour += 1
        if hour == 12:
            period = "PM" if period == "AM" else "AM"
        elif hour == 13:
            hour = 1
    return TimeOfDay(hour=hour, minute=minute, period=period)


def is_end_after_start(start: TimeOfDay, end: TimeOfDay) -> bool:
    return to_minutes(end) > to_minutes(start)


def parse_clock(text: str, period: str) -> TimeOfDay:
    """Parse "06:00" + "AM" into a TimeOfDay. Raises ValueError on malformed input."""
    match = _CLOCK_RE.match(text or "")
    if not match:
        raise ValueError(f"Invalid clock value: {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    # Midnight-style "00:15" from pickers maps to 12:15
    if hour == 0:
        hour = 12
    return TimeOfDay(hour=hour, minute=minute, period=period.upper())


def format_clock(tod: TimeOfDay) -> str:
    return f"{tod.hour:02d}:{tod.minute:02d}"


def booking_hours(date_time: DateTimeValue, default_hours: int = 4, min_hours: int = 2) -> int:
    """Whole hours covered by the time range, never below min_hours."""
    if date_time.time is None:
        return default_hours
    span = to_24h_hour(date_time.time.end) - to_24h_hour(date_time.time.start)
    return max(span, min_hours)


def default_time_range() -> TimeRange:
    start = TimeOfDay(hour=6, minute=0, period="AM")
    return TimeRange(start=start, end=add_15_minutes(start))
