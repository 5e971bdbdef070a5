from __future__ import annotations

import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from spacehive.application.utils.time_of_day import parse_clock
from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)
from spacehive.domain.entities.match_request import MatchStep
from spacehive.domain.entities.wizard_state import BookingFlow, RenderMode, Section


class TimeOfDaySchema(BaseModel):
    hour: int = Field(ge=1, le=12)
    minute: Literal[0, 15, 30, 45] = 0
    period: Literal["AM", "PM"] = "AM"

    @model_validator(mode="before")
    @classmethod
    def _accept_clock_text(cls, data: Any) -> Any:
        # Hand-off payloads carry {"time": "06:00", "period": "AM"}
        if isinstance(data, dict) and "time" in data and "hour" not in data:
            tod = parse_clock(str(data["time"]), str(data.get("period", "AM")))
            return {"hour": tod.hour, "minute": tod.minute, "period": tod.period}
        return data

    def to_domain(self) -> TimeOfDay:
        return TimeOfDay(hour=self.hour, minute=self.minute, period=self.period)

    @classmethod
    def from_domain(cls, tod: TimeOfDay) -> "TimeOfDaySchema":
        return cls(hour=tod.hour, minute=tod.minute, period=tod.period)


class TimeRangeSchema(BaseModel):
    start: TimeOfDaySchema
    end: TimeOfDaySchema


class LocationSchema(BaseModel):
    value: str | None = None
    is_flexible: bool = False

    def to_domain(self) -> LocationValue:
        return LocationValue(value=self.value, is_flexible=self.is_flexible)

    @classmethod
    def from_domain(cls, loc: LocationValue) -> "LocationSchema":
        return cls(value=loc.value, is_flexible=loc.is_flexible)


class DateTimeSchema(BaseModel):
    date: datetime.date | None = None
    time: TimeRangeSchema | None = None
    is_date_flexible: bool = False
    is_time_flexible: bool = False

    def to_domain(self) -> DateTimeValue:
        time_range = None
        if self.time is not None:
            time_range = TimeRange(start=self.time.start.to_domain(), end=self.time.end.to_domain())
        return DateTimeValue(
            date=self.date,
            time=time_range,
            is_date_flexible=self.is_date_flexible,
            is_time_flexible=self.is_time_flexible,
        )

    @classmethod
    def from_domain(cls, dt: DateTimeValue) -> "DateTimeSchema":
        time = None
        if dt.time is not None:
            time = TimeRangeSchema(
                start=TimeOfDaySchema.from_domain(dt.time.start),
                end=TimeOfDaySchema.from_domain(dt.time.end),
            )
        return cls(
            date=dt.date,
            time=time,
            is_date_flexible=dt.is_date_flexible,
            is_time_flexible=dt.is_time_flexible,
        )


class GuestsSchema(BaseModel):
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    def to_domain(self) -> GuestCounts:
        return GuestCounts(adults=self.adults, children=self.children, infants=self.infants)

    @classmethod
    def from_domain(cls, g: GuestCounts) -> "GuestsSchema":
        return cls(adults=g.adults, children=g.children, infants=g.infants)


class BudgetSchema(BaseModel):
    min: int = Field(default=0, ge=0)
    max: int = Field(default=200, ge=0)

    def to_domain(self) -> BudgetRange:
        return BudgetRange(min=self.min, max=self.max)

    @classmethod
    def from_domain(cls, b: BudgetRange) -> "BudgetSchema":
        return cls(min=b.min, max=b.max)


SECTION_SCHEMAS: dict[Section, type[BaseModel]] = {
    Section.location: LocationSchema,
    Section.date_time: DateTimeSchema,
    Section.guests: GuestsSchema,
    Section.budget: BudgetSchema,
}


class BookingDraftSchema(BaseModel):
    location: LocationSchema = Field(default_factory=LocationSchema)
    date_time: DateTimeSchema = Field(default_factory=DateTimeSchema)
    guests: GuestsSchema = Field(default_factory=GuestsSchema)
    budget: BudgetSchema = Field(default_factory=BudgetSchema)

    def to_domain(self) -> BookingDraft:
        return BookingDraft(
            location=self.location.to_domain(),
            date_time=self.date_time.to_domain(),
            guests=self.guests.to_domain(),
            budget=self.budget.to_domain(),
        )

    @classmethod
    def from_domain(cls, draft: BookingDraft) -> "BookingDraftSchema":
        return cls(
            location=LocationSchema.from_domain(draft.location),
            date_time=DateTimeSchema.from_domain(draft.date_time),
            guests=GuestsSchema.from_domain(draft.guests),
            budget=BudgetSchema.from_domain(draft.budget),
        )


# Booking form


class StartBookingFormSchema(BaseModel):
    flow: BookingFlow = BookingFlow.instant_book


class ActivateSectionSchema(BaseModel):
    section: Section | None = None


class BudgetEditSchema(BaseModel):
    min: int | None = None
    max: int | None = None


class SectionViewSchema(BaseModel):
    section: Section
    title: str
    mode: RenderMode
    summary: str
    is_complete: bool
    value: dict[str, Any]


class BookingFormViewSchema(BaseModel):
    session_id: str
    flow: BookingFlow
    active_section: Section | None
    completed_sections: list[Section]
    sections: list[SectionViewSchema]
    can_submit: bool
    submit_label: str


class HandoffSchema(BaseModel):
    screen: str
    payload: dict[str, Any]


# Match request


class StartMatchRequestSchema(BaseModel):
    form_data: BookingDraftSchema = Field(default_factory=BookingDraftSchema)


class MatchRequestUpdateSchema(BaseModel):
    event_type: str | None = None
    features: list[str] | None = None
    vibe: str | None = None
    flexibility: str | None = None
    extras: list[str] | None = None
    timeline: str | None = None
    notes: str | None = None


class MatchRequestDataSchema(BaseModel):
    event_type: str | None
    features: list[str]
    vibe: str | None
    flexibility: str | None
    extras: list[str]
    timeline: str | None
    notes: str


class MatchRequestViewSchema(BaseModel):
    request_id: str
    step: MatchStep
    step_name: str
    button_text: str
    can_proceed: bool
    sent: bool
    data: MatchRequestDataSchema
    review: dict[str, dict[str, str]] | None = None


# Instant booking


class VenueSchema(BaseModel):
    id: int
    title: str
    distance: str
    rating: float
    recent_bookings: int
    price: int
    price_unit: str
    image: str
    latitude: float
    longitude: float


class MapRegionSchema(BaseModel):
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float


class VenueSearchSchema(BaseModel):
    form_data: BookingDraftSchema = Field(default_factory=BookingDraftSchema)


class InstantBookingSessionSchema(BaseModel):
    session_id: str
    selected_venue_id: int | None
    venues: list[VenueSchema]


class QuoteRequestSchema(BaseModel):
    venue_id: int
    form_data: BookingDraftSchema = Field(default_factory=BookingDraftSchema)
    event_type: str | None = None
    extra_services: list[str] = Field(default_factory=list)


class QuoteResponseSchema(BaseModel):
    venue_id: int
    hours: int
    base_price: int
    extra_services_cost: int
    total_price: int
    extra_services: list[str]
    event_type: str | None = None
    action_label: str
