# solar_winds_api/routers/sensors.py

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from solar_winds_api.db.session import get_session
from solar_winds_api.repositories.sensors import SensorsRepository
from solar_winds_api.schemas.common import ErrorResponse
from solar_winds_api.schemas.sensors import (
    SensorCreate,
    SensorRead,
    SensorSearch,
    SensorUpdate,
)
from solar_winds_api.services.sensors_service import SensorsService

router = APIRouter(
    prefix="/sensors",
    tags=["sensors"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


def get_sensors_service(session: Session = Depends(get_session)) -> SensorsService:
    """
    Dependency-injected factory for SensorsService.
    """
    return SensorsService(SensorsRepository(session))


@router.post(
    "",
    response_model=SensorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a sensor",
    description=(
        "Register a solar panel sensor. `code` must be unique and the "
        "equipment address (and owner, when given) must exist."
    ),
)
def create_sensor(
    *,
    payload: SensorCreate,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.create_sensor(payload)


@router.get(
    "",
    response_model=List[SensorRead],
    summary="List sensors",
    description="Return every sensor with its owner, location and events, newest first.",
)
def list_sensors(service: SensorsService = Depends(get_sensors_service)) -> List[SensorRead]:
    return service.list_sensors()


@router.post("/search", response_model=List[SensorRead], summary="Search sensors")
def search_sensors(
    *,
    criteria: SensorSearch,
    service: SensorsService = Depends(get_sensors_service),
) -> List[SensorRead]:
    return service.search_sensors(criteria)


@router.get("/code/{code}", response_model=SensorRead, summary="Get a sensor by code")
def get_sensor_by_code(
    *,
    code: str,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.get_sensor_by_code(code)


@router.get("/{sensor_uuid}", response_model=SensorRead, summary="Get a single sensor")
def get_sensor(
    *,
    sensor_uuid: UUID,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.get_sensor(sensor_uuid)


@router.patch("/{sensor_uuid}", response_model=SensorRead, summary="Update a sensor")
def update_sensor(
    *,
    sensor_uuid: UUID,
    payload: SensorUpdate,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.update_sensor(sensor_uuid, payload)


@router.delete(
    "/{sensor_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a sensor",
    description="Deletes the sensor and all of its events.",
)
def delete_sensor(
    *,
    sensor_uuid: UUID,
    service: SensorsService = Depends(get_sensors_service),
) -> None:
    service.delete_sensor(sensor_uuid)


@router.post(
    "/{sensor_uuid}/increment-events",
    response_model=SensorRead,
    summary="Increment the event counter",
)
def increment_events(
    *,
    sensor_uuid: UUID,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.increment_events(sensor_uuid)


@router.post(
    "/{sensor_uuid}/increment-shutdowns",
    response_model=SensorRead,
    summary="Record a shutdown",
    description="Increments `total_shutdown` and sets `last_shutdown` to the current time.",
)
def increment_shutdowns(
    *,
    sensor_uuid: UUID,
    service: SensorsService = Depends(get_sensors_service),
) -> SensorRead:
    return service.increment_shutdowns(sensor_uuid)
