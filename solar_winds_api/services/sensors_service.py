# solar_winds_api/services/sensors_service.py

from __future__ import annotations

from typing import Any, Dict, List
from uuid import UUID

from solar_winds_api.db import models
from solar_winds_api.exceptions import DuplicateError, NotFoundError
from solar_winds_api.logging import get_logger
from solar_winds_api.repositories.addresses import AddressesRepository
from solar_winds_api.repositories.sensors import SensorsRepository
from solar_winds_api.repositories.users import UsersRepository
from solar_winds_api.schemas.sensors import (
    SensorCreate,
    SensorRead,
    SensorSearch,
    SensorUpdate,
)

logger = get_logger(__name__)


class SensorsService:
    """
    High-level service for sensors.

    Responsibilities:
    - Enforce code uniqueness.
    - Check that the equipment address and owning user exist.
    - Maintain the event / shutdown counters.
    """

    def __init__(self, repo: SensorsRepository) -> None:
        self._repo = repo
        self._addresses = AddressesRepository(repo.session)
        self._users = UsersRepository(repo.session)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_or_404(self, sensor_uuid: UUID) -> models.Sensor:
        sensor = self._repo.get_by_id(sensor_uuid)
        if sensor is None:
            raise NotFoundError("Sensor", "UUID", sensor_uuid)
        return sensor

    def _ensure_code_free(self, code: str) -> None:
        if self._repo.get_by_code(code) is not None:
            logger.info("sensor_rejected_duplicate_code", code=code)
            raise DuplicateError("Sensor", "code")

    def _ensure_references(self, fields: Dict[str, Any]) -> None:
        address_uuid = fields.get("equip_address_uuid")
        if address_uuid is not None and not self._addresses.exists(address_uuid):
            raise NotFoundError("Address", "UUID", address_uuid)

        user_uuid = fields.get("user_uuid")
        if user_uuid is not None and not self._users.exists(user_uuid):
            raise NotFoundError("User", "UUID", user_uuid)

    def _commit(self, sensor: models.Sensor) -> SensorRead:
        self._repo.session.commit()
        self._repo.session.refresh(sensor)
        return SensorRead.model_validate(sensor)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_sensor(self, payload: SensorCreate) -> SensorRead:
        fields = payload.model_dump()
        self._ensure_code_free(payload.code)
        self._ensure_references(fields)

        sensor = self._repo.create(**fields)
        result = self._commit(sensor)

        logger.info("sensor_created", uuid=str(sensor.uuid), code=sensor.code)
        return result

    def list_sensors(self) -> List[SensorRead]:
        return [SensorRead.model_validate(s) for s in self._repo.list_all()]

    def get_sensor(self, sensor_uuid: UUID) -> SensorRead:
        return SensorRead.model_validate(self._get_or_404(sensor_uuid))

    def get_sensor_by_code(self, code: str) -> SensorRead:
        sensor = self._repo.get_by_code(code)
        if sensor is None:
            raise NotFoundError("Sensor", "code", code)
        return SensorRead.model_validate(sensor)

    def update_sensor(self, sensor_uuid: UUID, payload: SensorUpdate) -> SensorRead:
        sensor = self._get_or_404(sensor_uuid)
        changes = payload.changes()

        code = changes.get("code")
        if code and code != sensor.code:
            self._ensure_code_free(code)
        self._ensure_references(changes)

        if changes:
            self._repo.update_fields(sensor, changes)
            logger.info("sensor_updated", uuid=str(sensor.uuid), fields=sorted(changes))
        return self._commit(sensor)

    def delete_sensor(self, sensor_uuid: UUID) -> None:
        """
        Delete a sensor together with its events.
        """
        sensor = self._get_or_404(sensor_uuid)
        self._repo.delete(sensor)
        self._repo.session.commit()
        logger.info("sensor_deleted", uuid=str(sensor_uuid))

    # -------------------------------------------------------------------------
    # Counters
    # -------------------------------------------------------------------------

    def increment_events(self, sensor_uuid: UUID) -> SensorRead:
        sensor = self._get_or_404(sensor_uuid)
        # total_events = total_events + 1, evaluated by the database.
        self._repo.update_fields(sensor, {"total_events": models.Sensor.total_events + 1})
        return self._commit(sensor)

    def increment_shutdowns(self, sensor_uuid: UUID) -> SensorRead:
        """
        Record one more shutdown and stamp ``last_shutdown`` with the current time.
        """
        sensor = self._get_or_404(sensor_uuid)
        self._repo.update_fields(
            sensor,
            {
                "total_shutdown": models.Sensor.total_shutdown + 1,
                "last_shutdown": models.utcnow(),
            },
        )
        logger.info("sensor_shutdown_recorded", uuid=str(sensor.uuid))
        return self._commit(sensor)

    def search_sensors(self, criteria: SensorSearch) -> List[SensorRead]:
        return [SensorRead.model_validate(s) for s in self._repo.search(criteria)]


__all__ = ["SensorsService"]
