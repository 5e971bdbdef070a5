from __future__ import annotations

from dataclasses import dataclass

from spacehive.domain.entities.booking_draft import BookingDraft


@dataclass(frozen=True)
class InstantBookingSession:
    """One client's pass over the venue map: the draft it searched with and its pick."""
    draft: BookingDraft
    selected_venue_id: int | None = None
