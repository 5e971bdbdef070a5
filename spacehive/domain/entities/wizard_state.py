from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from spacehive.domain.entities.booking_draft import BookingDraft


class Section(str, Enum):
    location = "location"
    date_time = "date_time"
    guests = "guests"
    budget = "budget"


SECTION_ORDER = (Section.location, Section.date_time, Section.guests, Section.budget)

SECTION_TITLES = {
    Section.location: "Location",
    Section.date_time: "Date & Time",
    Section.guests: "Guests",
    Section.budget: "Budget",
}


class BookingFlow(str, Enum):
    instant_book = "instant_book"
    match_request = "match_request"


class RenderMode(str, Enum):
    active = "active"
    completed_collapsed = "completed_collapsed"
    untouched_collapsed = "untouched_collapsed"


@dataclass(frozen=True)
class WizardState:
    active_section: Section | None = Section.location  # None when every section is collapsed
    completed_sections: frozenset[Section] = frozenset()
    draft: BookingDraft = field(default_factory=BookingDraft)
    flow: BookingFlow = BookingFlow.instant_book


@dataclass(frozen=True)
class SectionView:
    section: Section
    title: str
    mode: RenderMode
    summary: str
    is_complete: bool
    value: Any
