from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from ticket_tracker.dependencies.tickets import get_ticket_service
from ticket_tracker.tickets.errors import (
    LifecycleViolation,
    RatingNotAllowed,
    TicketNotFoundError,
    TicketValidationError,
)
from ticket_tracker.tickets.models import Ticket, TicketPatch
from ticket_tracker.tickets.rating import MAX_RATING, MIN_RATING, RatingPolicy
from ticket_tracker.tickets.service import TicketService
from ticket_tracker.tickets.state import TicketLifecycle, TicketStatus

router = APIRouter(prefix="/tickets", tags=["tickets"])


class TicketCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class TicketUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    status: TicketStatus | None = None

    def to_patch(self) -> TicketPatch:
        return TicketPatch(title=self.title, description=self.description, status=self.status)

    def ensure_payload(self) -> None:
        if self.to_patch().is_empty():
            raise HTTPException(status_code=400, detail="No fields provided for update")


class TicketStatusChangeRequest(BaseModel):
    status: TicketStatus
    strict: bool = False


class TicketRatingRequest(BaseModel):
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)


class TicketResponse(BaseModel):
    id: str
    title: str
    description: str
    status: TicketStatus
    created_at: str
    rating: int | None
    next_action: str | None
    can_edit_content: bool
    can_rate: bool


TicketServiceDep = Annotated[TicketService, Depends(get_ticket_service)]


def _to_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        status=ticket.status,
        created_at=ticket.created_at,
        rating=ticket.rating,
        next_action=TicketLifecycle.next_action(ticket.status),
        can_edit_content=TicketLifecycle.can_edit_content(ticket.status),
        can_rate=RatingPolicy.can_rate(ticket),
    )


@router.get("", response_model=list[TicketResponse])
async def list_tickets(service: TicketServiceDep) -> list[TicketResponse]:
    return [_to_response(ticket) for ticket in service.list_tickets()]


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket(payload: TicketCreateRequest, service: TicketServiceDep) -> TicketResponse:
    try:
        ticket = service.create_ticket(title=payload.title, description=payload.description)
    except TicketValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _to_response(ticket)


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: str, service: TicketServiceDep) -> TicketResponse:
    try:
        ticket = service.get_ticket(ticket_id)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(ticket)


@router.patch("/{ticket_id}", response_model=TicketResponse)
async def update_ticket(
    ticket_id: str,
    payload: TicketUpdateRequest,
    service: TicketServiceDep,
) -> TicketResponse:
    payload.ensure_payload()
    try:
        ticket = service.edit_ticket(
            ticket_id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
        )
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except TicketValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except LifecycleViolation as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(ticket)


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(ticket_id: str, service: TicketServiceDep) -> None:
    service.delete_ticket(ticket_id)


@router.post("/{ticket_id}/start", response_model=TicketResponse)
async def start_ticket(ticket_id: str, service: TicketServiceDep) -> TicketResponse:
    try:
        ticket = service.start_ticket(ticket_id)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LifecycleViolation as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(ticket)


@router.post("/{ticket_id}/complete", response_model=TicketResponse)
async def complete_ticket(ticket_id: str, service: TicketServiceDep) -> TicketResponse:
    try:
        ticket = service.complete_ticket(ticket_id)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LifecycleViolation as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(ticket)


@router.put("/{ticket_id}/status", response_model=TicketResponse)
async def change_ticket_status(
    ticket_id: str,
    payload: TicketStatusChangeRequest,
    service: TicketServiceDep,
) -> TicketResponse:
    try:
        ticket = service.change_status(ticket_id, new_status=payload.status, strict=payload.strict)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LifecycleViolation as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(ticket)


@router.put("/{ticket_id}/rating", response_model=TicketResponse)
async def rate_ticket(
    ticket_id: str,
    payload: TicketRatingRequest,
    service: TicketServiceDep,
) -> TicketResponse:
    try:
        ticket = service.rate_ticket(ticket_id, payload.rating)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except RatingNotAllowed as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(ticket)
