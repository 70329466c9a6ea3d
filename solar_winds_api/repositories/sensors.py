# solar_winds_api/repositories/sensors.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from ..db import models
from ..schemas.sensors import SensorSearch
from .base import BaseRepository, ilike_contains


class SensorsRepository(BaseRepository[models.Sensor]):
    """
    Data-access layer around the Sensor model.
    """

    model = models.Sensor

    def _base_select(self) -> Select[Any]:
        return select(models.Sensor).options(
            selectinload(models.Sensor.user),
            selectinload(models.Sensor.location),
            selectinload(models.Sensor.events),
        )

    def get_by_code(self, code: str) -> Optional[models.Sensor]:
        stmt = self._base_select().where(models.Sensor.code == code)
        return self.session.execute(stmt).scalars().first()

    def search(self, criteria: SensorSearch) -> Sequence[models.Sensor]:
        """
        Filter sensors by the given criteria, newest first.

        ``min_*`` / ``max_*`` bounds are inclusive.
        """
        Sensor = models.Sensor
        stmt = self._base_select()

        if criteria.code:
            stmt = stmt.where(ilike_contains(Sensor.code, criteria.code))
        if criteria.equip_address_uuid:
            stmt = stmt.where(Sensor.equip_address_uuid == criteria.equip_address_uuid)
        if criteria.user_uuid:
            stmt = stmt.where(Sensor.user_uuid == criteria.user_uuid)

        if criteria.min_total_events is not None:
            stmt = stmt.where(Sensor.total_events >= criteria.min_total_events)
        if criteria.max_total_events is not None:
            stmt = stmt.where(Sensor.total_events <= criteria.max_total_events)
        if criteria.min_angle is not None:
            stmt = stmt.where(Sensor.angle >= criteria.min_angle)
        if criteria.max_angle is not None:
            stmt = stmt.where(Sensor.angle <= criteria.max_angle)
        if criteria.min_power_generate is not None:
            stmt = stmt.where(Sensor.power_generate >= criteria.min_power_generate)
        if criteria.max_power_generate is not None:
            stmt = stmt.where(Sensor.power_generate <= criteria.max_power_generate)

        if criteria.search:
            stmt = stmt.where(ilike_contains(Sensor.code, criteria.search))

        return self._all(stmt.order_by(Sensor.created_at.desc()))


__all__ = ["SensorsRepository"]
