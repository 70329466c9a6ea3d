# solar_winds_api/repositories/addresses.py

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import selectinload

from ..db import models
from ..schemas.addresses import AddressSearch
from .base import BaseRepository, ilike_contains


class AddressesRepository(BaseRepository[models.Address]):
    """
    Data-access layer around the Address model.
    """

    model = models.Address

    def _base_select(self) -> Select[Any]:
        return select(models.Address).options(
            selectinload(models.Address.user),
            selectinload(models.Address.sensors),
        )

    def count_sensors(self, address: models.Address) -> int:
        """
        Number of sensors installed at ``address``.
        """
        stmt = (
            select(func.count())
            .select_from(models.Sensor)
            .where(models.Sensor.equip_address_uuid == address.uuid)
        )
        return int(self.session.execute(stmt).scalar_one())

    def search(self, criteria: AddressSearch) -> Sequence[models.Address]:
        Address = models.Address
        stmt = self._base_select()

        if criteria.user_uuid:
            stmt = stmt.where(Address.user_uuid == criteria.user_uuid)
        if criteria.sensor_uuid:
            stmt = stmt.where(Address.sensor_uuid == criteria.sensor_uuid)

        for field in ("street", "city", "state", "zipcode", "country"):
            value = getattr(criteria, field)
            if value:
                stmt = stmt.where(ilike_contains(getattr(Address, field), value))

        if criteria.search:
            stmt = stmt.where(
                or_(
                    ilike_contains(Address.street, criteria.search),
                    ilike_contains(Address.city, criteria.search),
                    ilike_contains(Address.state, criteria.search),
                    ilike_contains(Address.country, criteria.search),
                )
            )

        return self._all(stmt.order_by(Address.created_at.desc()))


__all__ = ["AddressesRepository"]
