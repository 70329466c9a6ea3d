# solar_winds_api/repositories/events.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, NamedTuple, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.orm import selectinload

from ..db import models
from ..schemas.events import EventSearch
from .base import BaseRepository


class EventAggregate(NamedTuple):
    count: int
    total_power: Optional[float]
    average_power: Optional[float]
    average_heat: Optional[float]
    last_timestamp: Optional[datetime]


class EventsRepository(BaseRepository[models.Event]):
    """
    Data-access layer around the Event model.

    Event listings are ordered by reading time, most recent first.
    """

    model = models.Event

    def _base_select(self) -> Select[Any]:
        return select(models.Event).options(selectinload(models.Event.sensor))

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_events(
        self,
        *,
        sensor_uuid: Optional[UUID] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[models.Event]:
        """
        List events, optionally restricted to one sensor and to an inclusive
        ``[start, end]`` time window. Each bound is applied only when given.
        """
        Event = models.Event
        stmt = self._base_select()

        if sensor_uuid is not None:
            stmt = stmt.where(Event.sensor_uuid == sensor_uuid)
        if start is not None:
            stmt = stmt.where(Event.timestamp >= start)
        if end is not None:
            stmt = stmt.where(Event.timestamp <= end)

        return self._all(stmt.order_by(Event.timestamp.desc()))

    def aggregate_for_sensor(self, sensor_uuid: UUID) -> EventAggregate:
        """
        Count / sum / averages / latest timestamp over one sensor's events,
        computed by the database in a single query.
        """
        Event = models.Event
        stmt = select(
            func.count(Event.uuid),
            func.sum(Event.power_generated),
            func.avg(Event.power_generated),
            func.avg(Event.heat),
            func.max(Event.timestamp),
        ).where(Event.sensor_uuid == sensor_uuid)

        count, total, avg_power, avg_heat, last = self.session.execute(stmt).one()
        return EventAggregate(
            count=int(count or 0),
            total_power=float(total) if total is not None else None,
            average_power=float(avg_power) if avg_power is not None else None,
            average_heat=float(avg_heat) if avg_heat is not None else None,
            last_timestamp=last,
        )

    def count_for_sensor(self, sensor_uuid: UUID) -> int:
        return self.count(models.Event.sensor_uuid == sensor_uuid)

    def search(self, criteria: EventSearch) -> Sequence[models.Event]:
        Event = models.Event
        stmt = self._base_select()

        if criteria.sensor_uuid:
            stmt = stmt.where(Event.sensor_uuid == criteria.sensor_uuid)
        if criteria.min_power_generated is not None:
            stmt = stmt.where(Event.power_generated >= criteria.min_power_generated)
        if criteria.max_power_generated is not None:
            stmt = stmt.where(Event.power_generated <= criteria.max_power_generated)
        if criteria.start_date is not None:
            stmt = stmt.where(Event.timestamp >= criteria.start_date)
        if criteria.end_date is not None:
            stmt = stmt.where(Event.timestamp <= criteria.end_date)
        if criteria.min_heat is not None:
            stmt = stmt.where(Event.heat >= criteria.min_heat)
        if criteria.max_heat is not None:
            stmt = stmt.where(Event.heat <= criteria.max_heat)

        return self._all(stmt.order_by(Event.timestamp.desc()))

    # ------------------------------------------------------------------
    # Bulk utilities
    # ------------------------------------------------------------------

    def add_many(self, events: Iterable[models.Event], *, batch_size: int = 100) -> int:
        """
        Persist events in flushed batches. Returns the number added.
        """
        added = 0
        batch: list[models.Event] = []
        for item in events:
            batch.append(item)
            if len(batch) >= batch_size:
                self.session.add_all(batch)
                self.session.flush()
                added += len(batch)
                batch = []
        if batch:
            self.session.add_all(batch)
            self.session.flush()
            added += len(batch)
        return added


__all__ = ["EventsRepository", "EventAggregate"]
