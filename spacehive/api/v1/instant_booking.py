from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from spacehive.api.v1.schemas import (
    HandoffSchema,
    InstantBookingSessionSchema,
    MapRegionSchema,
    QuoteRequestSchema,
    QuoteResponseSchema,
    VenueSchema,
    VenueSearchSchema,
)
from spacehive.application.exceptions import SessionNotFoundError, VenueNotFoundError
from spacehive.application.ports.navigation import Screen
from spacehive.application.ports.venue_catalog import VenueCatalogPort
from spacehive.application.use_cases.instant_booking import InstantBookingUseCase, review_action_label
from spacehive.domain.entities.instant_booking import InstantBookingSession
from spacehive.domain.entities.venue import Venue
from spacehive.wiring.dependencies import get_instant_booking_use_case, get_venue_catalog

router = APIRouter()


def _venue(v: Venue) -> VenueSchema:
    return VenueSchema(
        id=v.id,
        title=v.title,
        distance=v.distance,
        rating=v.rating,
        recent_bookings=v.recent_bookings,
        price=v.price,
        price_unit=v.price_unit,
        image=v.image,
        latitude=v.coordinates.latitude,
        longitude=v.coordinates.longitude,
    )


@router.get("/map-region", response_model=MapRegionSchema)
def map_region(catalog: VenueCatalogPort = Depends(get_venue_catalog)):
    region = catalog.map_center()
    return MapRegionSchema(
        latitude=region.latitude,
        longitude=region.longitude,
        latitude_delta=region.latitude_delta,
        longitude_delta=region.longitude_delta,
    )


@router.post("/search", response_model=list[VenueSchema])
def search(req: VenueSearchSchema, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    return [_venue(v) for v in uc.search(req.form_data.to_domain())]


@router.get("/venues/{venue_id}", response_model=VenueSchema)
def get_venue(venue_id: int, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    try:
        return _venue(uc.get_venue(venue_id))
    except VenueNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/quote", response_model=QuoteResponseSchema)
def quote(req: QuoteRequestSchema, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    try:
        q = uc.quote(req.venue_id, req.form_data.to_domain(), tuple(req.extra_services), req.event_type)
    except VenueNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return QuoteResponseSchema(
        venue_id=q.venue_id,
        hours=q.hours,
        base_price=q.base_price,
        extra_services_cost=q.extra_services_cost,
        total_price=q.total_price,
        extra_services=list(q.extra_services),
        event_type=q.event_type,
        action_label=review_action_label(q.event_type),
    )


@router.post("/checkout", response_model=HandoffSchema)
def checkout(req: QuoteRequestSchema, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    try:
        payload = uc.proceed_to_payment(
            req.venue_id, req.form_data.to_domain(), req.event_type, tuple(req.extra_services)
        )
    except VenueNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return HandoffSchema(screen=Screen.instant_booking_payment.value, payload=payload)


@router.post("/match-request", response_model=HandoffSchema)
def switch_to_match_request(
    req: VenueSearchSchema, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)
):
    payload = uc.switch_to_match_request(req.form_data.to_domain())
    return HandoffSchema(screen=Screen.match_request.value, payload=payload)


# Map sessions: per-client venue selection


def _session_view(
    uc: InstantBookingUseCase, session_id: str, session: InstantBookingSession
) -> InstantBookingSessionSchema:
    return InstantBookingSessionSchema(
        session_id=session_id,
        selected_venue_id=session.selected_venue_id,
        venues=[_venue(v) for v in uc.search(session.draft)],
    )


def _session_call(uc: InstantBookingUseCase, session_id: str, action) -> InstantBookingSessionSchema:
    try:
        session = action()
    except (SessionNotFoundError, VenueNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _session_view(uc, session_id, session)


@router.post("/sessions", response_model=InstantBookingSessionSchema, status_code=201)
def start_session(req: VenueSearchSchema, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    session_id, session = uc.start(req.form_data.to_domain())
    return _session_view(uc, session_id, session)


@router.get("/sessions/{session_id}", response_model=InstantBookingSessionSchema)
def get_session(session_id: str, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    return _session_call(uc, session_id, lambda: uc.get(session_id))


@router.post("/sessions/{session_id}/markers/{venue_id}", response_model=InstantBookingSessionSchema, status_code=202)
def press_marker(
    session_id: str, venue_id: int, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)
):
    """The selection lands after the debounce delay; the returned view may not show it yet."""

    def action():
        uc.press_marker(session_id, venue_id)
        return uc.get(session_id)

    return _session_call(uc, session_id, action)


@router.post("/sessions/{session_id}/settle", response_model=InstantBookingSessionSchema)
def settle(session_id: str, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    return _session_call(uc, session_id, lambda: uc.settle(session_id))


@router.post("/sessions/{session_id}/cards/{venue_id}", response_model=InstantBookingSessionSchema)
def press_card(
    session_id: str, venue_id: int, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)
):
    return _session_call(uc, session_id, lambda: uc.press_card(session_id, venue_id))


@router.delete("/sessions/{session_id}", status_code=204)
def close_session(session_id: str, uc: InstantBookingUseCase = Depends(get_instant_booking_use_case)):
    try:
        uc.close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
