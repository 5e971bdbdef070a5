from __future__ import annotations

from typing import Any

from spacehive.domain.entities.booking_draft import (
    BookingDraft,
    BudgetRange,
    DateTimeValue,
    GuestCounts,
    LocationValue,
)
from spacehive.domain.entities.wizard_state import BookingFlow, Section, WizardState

SECTION_VALUE_TYPES: dict[Section, type] = {
    Section.location: LocationValue,
    Section.date_time: DateTimeValue,
    Section.guests: GuestCounts,
    Section.budget: BudgetRange,
}


def default_value(section: Section, budget_ceiling: int = 200) -> Any:
    """Fresh value for a section, as shown when the flow starts."""
    if section is Section.budget:
        return BudgetRange(min=0, max=budget_ceiling)
    return SECTION_VALUE_TYPES[section]()


def default_draft(budget_ceiling: int = 200) -> BookingDraft:
    return BookingDraft(budget=BudgetRange(min=0, max=budget_ceiling))


def initial_state(flow: BookingFlow = BookingFlow.instant_book, budget_ceiling: int = 200) -> WizardState:
    return WizardState(
        active_section=Section.location,
        completed_sections=frozenset(),
        draft=default_draft(budget_ceiling),
        flow=flow,
    )


def get_section_value(draft: BookingDraft, section: Section) -> Any:
    if section is Section.location:
        return draft.location
    if section is Section.date_time:
        return draft.date_time
    if section is Section.guests:
        return draft.guests
    return draft.budget


def replace_section_value(draft: BookingDraft, section: Section, value: Any) -> BookingDraft:
    """Return a new draft with one section swapped out."""
    expected = SECTION_VALUE_TYPES[section]
    if not isinstance(value, expected):
        raise TypeError(f"{section.value} expects {expected.__name__}, got {type(value).__name__}")
    return BookingDraft(
        location=value if section is Section.location else draft.location,
        date_time=value if section is Section.date_time else draft.date_time,
        guests=value if section is Section.guests else draft.guests,
        budget=value if section is Section.budget else draft.budget,
    )
