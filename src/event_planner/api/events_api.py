"""
Events API

CRUD endpoints for a user's scheduled events.
"""

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query

from event_planner.core.dependencies import get_event_repository
from event_planner.repositories.event_repository import EventRepository
from event_planner.schemas.common import ERROR_RESPONSES
from event_planner.schemas.event import (
    CreateEventRequest,
    UpdateEventRequest,
    EventResponse,
    EventCreatedResponse,
    EventMutationResponse,
)


router = APIRouter(
    prefix="/events",
    tags=["Events"],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=List[EventResponse])
def list_events(
    user_id: Optional[int] = Query(None, alias="userId"),
    repo: EventRepository = Depends(get_event_repository),
):
    events = repo.list_for_user(user_id)
    return [EventResponse.model_validate(event) for event in events]


@router.post("", response_model=EventCreatedResponse)
def create_event(
    request: Optional[CreateEventRequest] = Body(None),
    repo: EventRepository = Depends(get_event_repository),
):
    if request is None:
        request = CreateEventRequest()
    event = repo.create_event(
        user_id=request.user_id,
        title=request.title,
        date=request.date,
        time=request.time,
        description=request.description,
        link=request.link,
    )
    return EventCreatedResponse(id=event.id)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: int, repo: EventRepository = Depends(get_event_repository)):
    return EventResponse.model_validate(repo.get_event(event_id))


@router.put("/{event_id}", response_model=EventMutationResponse)
def update_event(
    event_id: int,
    request: Optional[UpdateEventRequest] = Body(None),
    repo: EventRepository = Depends(get_event_repository),
):
    """Replace all mutable fields; omitted description/link are cleared."""
    if request is None:
        request = UpdateEventRequest()
    repo.update_event(
        event_id,
        title=request.title,
        date=request.date,
        time=request.time,
        description=request.description,
        link=request.link,
    )
    return EventMutationResponse(message="Event updated successfully", event_id=event_id)


@router.delete("/{event_id}", response_model=EventMutationResponse)
def delete_event(event_id: int, repo: EventRepository = Depends(get_event_repository)):
    repo.delete_event(event_id)
    return EventMutationResponse(message="Event deleted successfully", event_id=event_id)
