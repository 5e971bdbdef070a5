from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from spacehive.api.v1.schemas import (
    HandoffSchema,
    MatchRequestDataSchema,
    MatchRequestUpdateSchema,
    MatchRequestViewSchema,
    StartMatchRequestSchema,
)
from spacehive.application.exceptions import SessionNotFoundError, StepNotReadyError
from spacehive.application.ports.navigation import Screen
from spacehive.application.use_cases.match_request import (
    MatchRequestUseCase,
    button_text,
    is_step_valid,
    review_summary,
)
from spacehive.domain.entities.match_request import MatchRequestState, MatchStep
from spacehive.wiring.dependencies import get_match_request_use_case

router = APIRouter()


def _view(request_id: str, state: MatchRequestState) -> MatchRequestViewSchema:
    data = state.data
    return MatchRequestViewSchema(
        request_id=request_id,
        step=state.step,
        step_name=state.step.name,
        button_text=button_text(state),
        can_proceed=is_step_valid(state),
        sent=state.sent,
        data=MatchRequestDataSchema(
            event_type=data.event_type,
            features=list(data.features),
            vibe=data.vibe,
            flexibility=data.flexibility,
            extras=list(data.extras),
            timeline=data.timeline,
            notes=data.notes,
        ),
        review=review_summary(state) if state.step == MatchStep.review else None,
    )


def _handle(request_id: str, action) -> MatchRequestViewSchema:
    try:
        state = action()
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StepNotReadyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view(request_id, state)


@router.post("", response_model=MatchRequestViewSchema, status_code=201)
def start(req: StartMatchRequestSchema, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    request_id, state = uc.start(req.form_data.to_domain())
    return _view(request_id, state)


@router.get("/{request_id}", response_model=MatchRequestViewSchema)
def get(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.get(request_id))


@router.patch("/{request_id}", response_model=MatchRequestViewSchema)
def update(
    request_id: str,
    req: MatchRequestUpdateSchema,
    uc: MatchRequestUseCase = Depends(get_match_request_use_case),
):
    changes = req.model_dump(exclude_unset=True)
    return _handle(request_id, lambda: uc.update(request_id, changes))


@router.post("/{request_id}/features/{feature}", response_model=MatchRequestViewSchema)
def toggle_feature(request_id: str, feature: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.toggle_feature(request_id, feature))


@router.post("/{request_id}/extras/{extra}", response_model=MatchRequestViewSchema)
def toggle_extra(request_id: str, extra: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.toggle_extra(request_id, extra))


@router.post("/{request_id}/next", response_model=MatchRequestViewSchema)
def next_step(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.next_step(request_id))


@router.post("/{request_id}/back", response_model=MatchRequestViewSchema)
def previous_step(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.previous_step(request_id))


@router.post("/{request_id}/send", response_model=MatchRequestViewSchema)
def send(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    return _handle(request_id, lambda: uc.send_request(request_id))


@router.post("/{request_id}/instant-book", response_model=HandoffSchema)
def switch_to_instant_book(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    try:
        payload = uc.switch_to_instant_book(request_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return HandoffSchema(screen=Screen.instant_booking.value, payload=payload)


@router.delete("/{request_id}", status_code=204)
def close(request_id: str, uc: MatchRequestUseCase = Depends(get_match_request_use_case)):
    try:
        uc.close(request_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
