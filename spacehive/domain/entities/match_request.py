from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from spacehive.domain.entities.booking_draft import BookingDraft


class MatchStep(IntEnum):
    event_type = 0
    features = 1
    vibe = 2
    flexibility = 3
    extras = 4
    timeline = 5
    notes = 6
    review = 7


@dataclass(frozen=True)
class MatchRequestData:
    event_type: str | None = None
    features: tuple[str, ...] = ()
    vibe: str | None = None  # vibe id, e.g. "cozy-warm"
    flexibility: str | None = None  # flexibility id, e.g. "slightly-flexible"
    extras: tuple[str, ...] = ()
    timeline: str | None = None  # timeline id, e.g. "within-week"
    notes: str = ""


@dataclass(frozen=True)
class MatchRequestState:
    draft: BookingDraft
    step: MatchStep = MatchStep.event_type
    data: MatchRequestData = field(default_factory=MatchRequestData)
    sent: bool = False
