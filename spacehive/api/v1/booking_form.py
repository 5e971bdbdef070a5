from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, Body, Depends, HTTPException, Response
from pydantic import ValidationError

from spacehive.api.v1.schemas import (
    SECTION_SCHEMAS,
    ActivateSectionSchema,
    BookingFormViewSchema,
    BudgetEditSchema,
    HandoffSchema,
    SectionViewSchema,
    StartBookingFormSchema,
)
from spacehive.application.exceptions import SessionNotFoundError, StepNotReadyError
from spacehive.application.ports.venue_catalog import VenueCatalogPort
from spacehive.application.use_cases.booking_form import BookingFormUseCase
from spacehive.domain.entities.wizard_state import Section, WizardState
from spacehive.wiring.dependencies import get_booking_form_use_case, get_venue_catalog

router = APIRouter()


def _view(uc: BookingFormUseCase, session_id: str, state: WizardState) -> BookingFormViewSchema:
    wizard = uc.wizard
    sections = [
        SectionViewSchema(
            section=v.section,
            title=v.title,
            mode=v.mode,
            summary=v.summary,
            is_complete=v.is_complete,
            value=SECTION_SCHEMAS[v.section].from_domain(v.value).model_dump(mode="json"),
        )
        for v in wizard.section_views(state)
    ]
    return BookingFormViewSchema(
        session_id=session_id,
        flow=state.flow,
        active_section=state.active_section,
        completed_sections=sorted(state.completed_sections, key=lambda s: list(Section).index(s)),
        sections=sections,
        can_submit=wizard.can_submit(state),
        submit_label=wizard.submit_label(state),
    )


def _apply(uc: BookingFormUseCase, session_id: str, transition) -> BookingFormViewSchema:
    try:
        state = uc.apply(session_id, transition)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view(uc, session_id, state)


@router.get("/location-suggestions", response_model=list[str])
def location_suggestions(catalog: VenueCatalogPort = Depends(get_venue_catalog)):
    return catalog.location_suggestions()


@router.post("/sessions", response_model=BookingFormViewSchema, status_code=201)
def start_session(
    req: StartBookingFormSchema | None = None,
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    flow = req.flow if req else StartBookingFormSchema().flow
    session_id, state = uc.start(flow)
    return _view(uc, session_id, state)


@router.get("/sessions/{session_id}", response_model=BookingFormViewSchema)
def get_session(session_id: str, uc: BookingFormUseCase = Depends(get_booking_form_use_case)):
    try:
        state = uc.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _view(uc, session_id, state)


@router.post("/sessions/{session_id}/activate", response_model=BookingFormViewSchema)
def activate(
    session_id: str,
    req: ActivateSectionSchema,
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    return _apply(uc, session_id, lambda s: uc.wizard.activate(s, req.section))


@router.put("/sessions/{session_id}/sections/{section}", response_model=BookingFormViewSchema)
def update_section(
    session_id: str,
    section: Section,
    body: dict[str, Any] = Body(...),
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    try:
        value = SECTION_SCHEMAS[section].model_validate(body).to_domain()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    return _apply(uc, session_id, lambda s: uc.wizard.update_value(s, section, value))


@router.post("/sessions/{session_id}/sections/{section}/complete", response_model=BookingFormViewSchema)
def complete_section(
    session_id: str,
    section: Section,
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    return _apply(uc, session_id, lambda s: uc.wizard.complete_section(s, section))


@router.post("/sessions/{session_id}/sections/{section}/clear", response_model=BookingFormViewSchema)
def clear_section(
    session_id: str,
    section: Section,
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    return _apply(uc, session_id, lambda s: uc.wizard.clear_section(s, section))


@router.post("/sessions/{session_id}/guests/{kind}/{direction}", response_model=BookingFormViewSchema)
def step_guests(
    session_id: str,
    kind: Literal["adults", "children", "infants"],
    direction: Literal["increment", "decrement"],
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    if direction == "increment":
        return _apply(uc, session_id, lambda s: uc.wizard.increment_guests(s, kind))
    return _apply(uc, session_id, lambda s: uc.wizard.decrement_guests(s, kind))


@router.post("/sessions/{session_id}/budget", response_model=BookingFormViewSchema)
def edit_budget(
    session_id: str,
    req: BudgetEditSchema,
    uc: BookingFormUseCase = Depends(get_booking_form_use_case),
):
    def transition(state: WizardState) -> WizardState:
        if req.min is not None:
            state = uc.wizard.set_budget_min(state, req.min)
        if req.max is not None:
            state = uc.wizard.set_budget_max(state, req.max)
        return state

    return _apply(uc, session_id, transition)


@router.post("/sessions/{session_id}/submit", response_model=HandoffSchema)
def submit(session_id: str, uc: BookingFormUseCase = Depends(get_booking_form_use_case)):
    try:
        result = uc.submit(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StepNotReadyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return HandoffSchema(screen=result.screen.value, payload=result.payload)


@router.delete("/sessions/{session_id}", status_code=204)
def close_session(session_id: str, uc: BookingFormUseCase = Depends(get_booking_form_use_case)):
    try:
        uc.close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
