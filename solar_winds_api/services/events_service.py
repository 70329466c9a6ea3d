# solar_winds_api/services/events_service.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from solar_winds_api.db import models
from solar_winds_api.exceptions import NotFoundError
from solar_winds_api.logging import get_logger
from solar_winds_api.repositories.events import EventsRepository
from solar_winds_api.repositories.sensors import SensorsRepository
from solar_winds_api.schemas.events import (
    EventCreate,
    EventRead,
    EventSearch,
    EventUpdate,
    SensorStats,
)

logger = get_logger(__name__)


class EventsService:
    """
    High-level service for sensor readings.

    Listings are newest-first by reading ``timestamp``. Reads scoped to a
    sensor (``list_sensor_events``, ``get_sensor_stats``) do not require the
    sensor to exist: an unknown sensor simply has no events.
    """

    def __init__(self, repo: EventsRepository) -> None:
        self._repo = repo
        self._sensors = SensorsRepository(repo.session)

    def _get_or_404(self, event_uuid: UUID) -> models.Event:
        event = self._repo.get_by_id(event_uuid)
        if event is None:
            raise NotFoundError("Event", "UUID", event_uuid)
        return event

    def _ensure_sensor_exists(self, sensor_uuid: UUID) -> None:
        if not self._sensors.exists(sensor_uuid):
            raise NotFoundError("Sensor", "UUID", sensor_uuid)

    def _commit(self, event: models.Event) -> EventRead:
        self._repo.session.commit()
        self._repo.session.refresh(event)
        return EventRead.model_validate(event)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_event(self, payload: EventCreate) -> EventRead:
        self._ensure_sensor_exists(payload.sensor_uuid)

        event = self._repo.create(**payload.model_dump())
        result = self._commit(event)

        logger.debug("event_created", uuid=str(event.uuid), sensor_uuid=str(event.sensor_uuid))
        return result

    def list_events(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[EventRead]:
        events = self._repo.list_events(start=start, end=end)
        return [EventRead.model_validate(e) for e in events]

    def list_sensor_events(
        self,
        sensor_uuid: UUID,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[EventRead]:
        events = self._repo.list_events(sensor_uuid=sensor_uuid, start=start, end=end)
        return [EventRead.model_validate(e) for e in events]

    def get_event(self, event_uuid: UUID) -> EventRead:
        return EventRead.model_validate(self._get_or_404(event_uuid))

    def get_sensor_stats(self, sensor_uuid: UUID) -> SensorStats:
        """
        Totals and averages over every event of ``sensor_uuid``.

        A sensor without events yields zeros and ``last_event=None``.
        """
        agg = self._repo.aggregate_for_sensor(sensor_uuid)
        if agg.count == 0:
            return SensorStats()

        return SensorStats(
            total_events=agg.count,
            total_power_generated=agg.total_power or 0.0,
            average_power_generated=agg.average_power or 0.0,
            average_heat=agg.average_heat or 0.0,
            last_event=agg.last_timestamp,
        )

    def update_event(self, event_uuid: UUID, payload: EventUpdate) -> EventRead:
        event = self._get_or_404(event_uuid)
        changes = payload.changes()

        if "sensor_uuid" in changes:
            self._ensure_sensor_exists(changes["sensor_uuid"])

        if changes:
            self._repo.update_fields(event, changes)
            logger.info("event_updated", uuid=str(event.uuid), fields=sorted(changes))
        return self._commit(event)

    def delete_event(self, event_uuid: UUID) -> None:
        event = self._get_or_404(event_uuid)
        self._repo.delete(event)
        self._repo.session.commit()
        logger.info("event_deleted", uuid=str(event_uuid))

    def search_events(self, criteria: EventSearch) -> List[EventRead]:
        return [EventRead.model_validate(e) for e in self._repo.search(criteria)]


__all__ = ["EventsService"]
