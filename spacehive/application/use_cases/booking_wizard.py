from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any

from spacehive.application.utils.completion import (
    all_complete,
    is_budget_complete,
    is_date_time_complete,
    is_guests_complete,
    is_location_complete,
)
from spacehive.application.utils.display_formatters import (
    NONE_PLACEHOLDER,
    format_budget,
    format_date_time,
    format_guests,
    format_location,
)
from spacehive.application.utils.state_helpers import (
    default_value,
    get_section_value,
    initial_state,
    replace_section_value,
)
from spacehive.application.utils.time_of_day import (
    add_15_minutes,
    default_time_range,
    is_end_after_start,
)
from spacehive.domain.entities.booking_draft import (
    BudgetRange,
    GuestCounts,
    LocationValue,
    TimeOfDay,
    TimeRange,
)
from spacehive.domain.entities.wizard_state import (
    SECTION_ORDER,
    SECTION_TITLES,
    BookingFlow,
    RenderMode,
    Section,
    SectionView,
    WizardState,
)

GUEST_KINDS = ("adults", "children", "infants")
GUEST_FLOORS = {"adults": 1, "children": 0, "infants": 0}

SUBMIT_LABELS = {
    BookingFlow.instant_book: "Search",
    BookingFlow.match_request: "Request a Match",
}

_COMPLETION = {
    Section.location: is_location_complete,
    Section.date_time: is_date_time_complete,
    Section.guests: is_guests_complete,
    Section.budget: is_budget_complete,
}

_FORMATTERS = {
    Section.location: format_location,
    Section.date_time: format_date_time,
    Section.guests: format_guests,
    Section.budget: format_budget,
}


class BookingFormWizard:
    """
    Transitions for the four-section booking form.

    Every operation takes a WizardState and returns a new one; nothing is
    mutated. Editing never marks a section complete, only complete_section does.
    """

    def __init__(self, budget_ceiling: int = 200) -> None:
        self._budget_ceiling = budget_ceiling
        self._logger = logging.getLogger(__name__)

    @property
    def budget_ceiling(self) -> int:
        return self._budget_ceiling

    def start(self, flow: BookingFlow = BookingFlow.instant_book) -> WizardState:
        return initial_state(flow=flow, budget_ceiling=self._budget_ceiling)

    # Core transitions

    def activate(self, state: WizardState, section: Section | None) -> WizardState:
        return replace(state, active_section=section)

    def update_value(self, state: WizardState, section: Section, value: Any) -> WizardState:
        draft = replace_section_value(state.draft, section, self._bounded(section, value))
        return replace(state, draft=draft)

    def _bounded(self, section: Section, value: Any) -> Any:
        """Hold the adult floor and the budget ceiling whatever the caller sends."""
        if section is Section.guests and isinstance(value, GuestCounts) and value.adults < GUEST_FLOORS["adults"]:
            return replace(value, adults=GUEST_FLOORS["adults"])
        if section is Section.budget and isinstance(value, BudgetRange):
            ceiling = self._budget_ceiling
            if value.min > ceiling or value.max > ceiling:
                return BudgetRange(min=min(value.min, ceiling), max=min(value.max, ceiling))
        return value

    def complete_section(self, state: WizardState, section: Section) -> WizardState:
        self._logger.debug("Section completed", extra={"section": section.value})
        return replace(
            state,
            active_section=None,
            completed_sections=state.completed_sections | {section},
        )

    def clear_section(self, state: WizardState, section: Section) -> WizardState:
        draft = replace_section_value(
            state.draft, section, default_value(section, self._budget_ceiling)
        )
        return replace(
            state,
            draft=draft,
            completed_sections=state.completed_sections - {section},
        )

    # Location edits

    def choose_location(self, state: WizardState, value: str) -> WizardState:
        text = value.strip()
        if not text:
            return state
        return self.update_value(state, Section.location, LocationValue(value=text, is_flexible=False))

    def set_location_flexible(self, state: WizardState, flexible: bool) -> WizardState:
        current = state.draft.location
        if flexible:
            return self.update_value(state, Section.location, LocationValue(value=None, is_flexible=True))
        return self.update_value(state, Section.location, replace(current, is_flexible=False))

    # Date & time edits

    def choose_date(self, state: WizardState, value: date) -> WizardState:
        current = state.draft.date_time
        return self.update_value(
            state, Section.date_time, replace(current, date=value, is_date_flexible=False)
        )

    def set_date_flexible(self, state: WizardState, flexible: bool) -> WizardState:
        current = state.draft.date_time
        if flexible:
            updated = replace(current, date=None, is_date_flexible=True)
        else:
            updated = replace(current, is_date_flexible=False)
        return self.update_value(state, Section.date_time, updated)

    def set_time_flexible(self, state: WizardState, flexible: bool) -> WizardState:
        current = state.draft.date_time
        if flexible:
            updated = replace(current, time=None, is_time_flexible=True)
        else:
            updated = replace(current, time=current.time or default_time_range(), is_time_flexible=False)
        return self.update_value(state, Section.date_time, updated)

    def set_start_time(self, state: WizardState, start: TimeOfDay) -> WizardState:
        """
        Pick a start time; the end follows a quarter hour later.
        Ignored when that end would roll past midnight (11:45 PM), so the
        range never ends before it starts.
        """
        end = add_15_minutes(start)
        if not is_end_after_start(start, end):
            return state
        current = state.draft.date_time
        time_range = TimeRange(start=start, end=end)
        return self.update_value(
            state, Section.date_time, replace(current, time=time_range, is_time_flexible=False)
        )

    def set_end_time(self, state: WizardState, end: TimeOfDay) -> WizardState:
        """Pick an end time. Ignored unless it falls strictly after the start."""
        current = state.draft.date_time
        start = current.time.start if current.time else default_time_range().start
        if not is_end_after_start(start, end):
            return state
        return self.update_value(
            state,
            Section.date_time,
            replace(current, time=TimeRange(start=start, end=end), is_time_flexible=False),
        )

    # Guest counters

    def increment_guests(self, state: WizardState, kind: str) -> WizardState:
        return self._step_guests(state, kind, 1)

    def decrement_guests(self, state: WizardState, kind: str) -> WizardState:
        return self._step_guests(state, kind, -1)

    def _step_guests(self, state: WizardState, kind: str, delta: int) -> WizardState:
        if kind not in GUEST_KINDS:
            raise ValueError(f"Unknown guest kind: {kind!r}")
        guests = state.draft.guests
        count = max(GUEST_FLOORS[kind], getattr(guests, kind) + delta)
        return self.update_value(state, Section.guests, replace(guests, **{kind: count}))

    # Budget range

    def set_budget_min(self, state: WizardState, value: int) -> WizardState:
        budget = state.draft.budget
        upper = min(budget.max, self._budget_ceiling)
        clamped = max(0, min(int(value), upper))
        return self.update_value(state, Section.budget, BudgetRange(min=clamped, max=upper))

    def set_budget_max(self, state: WizardState, value: int) -> WizardState:
        budget = state.draft.budget
        clamped = max(budget.min, min(int(value), self._budget_ceiling))
        return self.update_value(state, Section.budget, BudgetRange(min=budget.min, max=clamped))

    # Read side

    def is_section_complete(self, state: WizardState, section: Section) -> bool:
        return _COMPLETION[section](get_section_value(state.draft, section))

    def section_view(self, state: WizardState, section: Section) -> SectionView:
        value = get_section_value(state.draft, section)
        if state.active_section == section:
            mode = RenderMode.active
        elif section in state.completed_sections:
            mode = RenderMode.completed_collapsed
        else:
            mode = RenderMode.untouched_collapsed

        summary = NONE_PLACEHOLDER
        if mode is not RenderMode.untouched_collapsed:
            summary = _FORMATTERS[section](value)
        return SectionView(
            section=section,
            title=SECTION_TITLES[section],
            mode=mode,
            summary=summary,
            is_complete=_COMPLETION[section](value),
            value=value,
        )

    def section_views(self, state: WizardState) -> list[SectionView]:
        return [self.section_view(state, section) for section in SECTION_ORDER]

    def can_submit(self, state: WizardState) -> bool:
        return all_complete(state.draft)

    def submit_label(self, state: WizardState) -> str:
        if not self.can_submit(state):
            return "Save"
        return SUBMIT_LABELS[state.flow]

