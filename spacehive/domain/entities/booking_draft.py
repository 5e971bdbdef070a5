from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

PERIODS = ("AM", "PM")
MINUTE_STEPS = (0, 15, 30, 45)


@dataclass(frozen=True)
class LocationValue:
    value: str | None = None  # e.g. "Downtown, Calgary"
    is_flexible: bool = False


@dataclass(frozen=True)
class TimeOfDay:
    hour: int = 6  # 1..12
    minute: int = 0  # one of MINUTE_STEPS
    period: str = "AM"  # "AM" | "PM"

    def __post_init__(self) -> None:
        if not 1 <= self.hour <= 12:
            raise ValueError(f"hour must be between 1 and 12, got {self.hour}")
        if self.minute not in MINUTE_STEPS:
            raise ValueError(f"minute must be one of {MINUTE_STEPS}, got {self.minute}")
        if self.period not in PERIODS:
            raise ValueError(f"period must be AM or PM, got {self.period!r}")


@dataclass(frozen=True)
class TimeRange:
    start: TimeOfDay
    end: TimeOfDay


@dataclass(frozen=True)
class DateTimeValue:
    date: date | None = None
    time: TimeRange | None = None
    is_date_flexible: bool = False
    is_time_flexible: bool = False


@dataclass(frozen=True)
class GuestCounts:
    adults: int = 1
    children: int = 0
    infants: int = 0

    def __post_init__(self) -> None:
        if min(self.adults, self.children, self.infants) < 0:
            raise ValueError("guest counts cannot be negative")


@dataclass(frozen=True)
class BudgetRange:
    min: int = 0
    max: int = 200  # per hour

    def __post_init__(self) -> None:
        if self.min < 0 or self.max < 0:
            raise ValueError("budget bounds cannot be negative")


@dataclass(frozen=True)
class BookingDraft:
    location: LocationValue = field(default_factory=LocationValue)
    date_time: DateTimeValue = field(default_factory=DateTimeValue)
    guests: GuestCounts = field(default_factory=GuestCounts)
    budget: BudgetRange = field(default_factory=BudgetRange)
