# solar_winds_api/routers/events.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from solar_winds_api.db.session import get_session
from solar_winds_api.repositories.events import EventsRepository
from solar_winds_api.schemas.common import ErrorResponse, as_utc
from solar_winds_api.schemas.events import (
    EventCreate,
    EventRead,
    EventSearch,
    EventUpdate,
    SensorStats,
)
from solar_winds_api.services.events_service import EventsService

router = APIRouter(
    prefix="/events",
    tags=["events"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


def get_events_service(session: Session = Depends(get_session)) -> EventsService:
    """
    Dependency-injected factory for EventsService.
    """
    return EventsService(EventsRepository(session))


def date_range(
    start_date: Optional[datetime] = Query(
        None,
        alias="startDate",
        description="Inclusive lower bound on the event timestamp (ISO-8601).",
    ),
    end_date: Optional[datetime] = Query(
        None,
        alias="endDate",
        description="Inclusive upper bound on the event timestamp (ISO-8601).",
    ),
) -> dict:
    return {
        "start": as_utc(start_date) if start_date is not None else None,
        "end": as_utc(end_date) if end_date is not None else None,
    }


@router.post(
    "",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record an event",
)
def create_event(
    *,
    payload: EventCreate,
    service: EventsService = Depends(get_events_service),
) -> EventRead:
    return service.create_event(payload)


@router.get(
    "",
    response_model=List[EventRead],
    summary="List events",
    description="Events ordered by timestamp, most recent first, optionally within a date range.",
)
def list_events(
    *,
    window: dict = Depends(date_range),
    service: EventsService = Depends(get_events_service),
) -> List[EventRead]:
    return service.list_events(**window)


@router.post("/search", response_model=List[EventRead], summary="Search events")
def search_events(
    *,
    criteria: EventSearch,
    service: EventsService = Depends(get_events_service),
) -> List[EventRead]:
    return service.search_events(criteria)


@router.get(
    "/sensor/{sensor_uuid}",
    response_model=List[EventRead],
    summary="List the events of a sensor",
)
def list_sensor_events(
    *,
    sensor_uuid: UUID,
    window: dict = Depends(date_range),
    service: EventsService = Depends(get_events_service),
) -> List[EventRead]:
    return service.list_sensor_events(sensor_uuid, **window)


@router.get(
    "/sensor/{sensor_uuid}/stats",
    response_model=SensorStats,
    response_model_by_alias=True,
    summary="Aggregate statistics of a sensor",
)
def get_sensor_stats(
    *,
    sensor_uuid: UUID,
    service: EventsService = Depends(get_events_service),
) -> SensorStats:
    return service.get_sensor_stats(sensor_uuid)


@router.get("/{event_uuid}", response_model=EventRead, summary="Get a single event")
def get_event(
    *,
    event_uuid: UUID,
    service: EventsService = Depends(get_events_service),
) -> EventRead:
    return service.get_event(event_uuid)


@router.patch("/{event_uuid}", response_model=EventRead, summary="Update an event")
def update_event(
    *,
    event_uuid: UUID,
    payload: EventUpdate,
    service: EventsService = Depends(get_events_service),
) -> EventRead:
    return service.update_event(event_uuid, payload)


@router.delete(
    "/{event_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event",
)
def delete_event(
    *,
    event_uuid: UUID,
    service: EventsService = Depends(get_events_service),
) -> None:
    service.delete_event(event_uuid)
