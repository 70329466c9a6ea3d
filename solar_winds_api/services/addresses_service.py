# solar_winds_api/services/addresses_service.py

from __future__ import annotations

from typing import List
from uuid import UUID

from solar_winds_api.db import models
from solar_winds_api.exceptions import (
    AddressInUseError,
    InvalidAddressOwnerError,
    NotFoundError,
)
from solar_winds_api.logging import get_logger
from solar_winds_api.repositories.addresses import AddressesRepository
from solar_winds_api.schemas.addresses import (
    AddressCreate,
    AddressRead,
    AddressSearch,
    AddressUpdate,
)

logger = get_logger(__name__)


class AddressesService:
    """
    High-level service for addresses.

    Checks the owner rule (exactly one of user_uuid / sensor_uuid) before
    anything reaches the database, so callers get a clean 400. The ORM flush
    hook on ``Address`` repeats the same check for writers that bypass this
    service.
    """

    def __init__(self, repo: AddressesRepository) -> None:
        self._repo = repo

    def _get_or_404(self, address_uuid: UUID) -> models.Address:
        address = self._repo.get_by_id(address_uuid)
        if address is None:
            raise NotFoundError("Address", "UUID", address_uuid)
        return address

    def _check_owner(self, user_uuid: UUID | None, sensor_uuid: UUID | None) -> None:
        try:
            models.check_address_owner(user_uuid, sensor_uuid)
        except InvalidAddressOwnerError as exc:
            logger.info("address_rejected_owner", reason=str(exc))
            raise

    def _commit(self, address: models.Address) -> AddressRead:
        self._repo.session.commit()
        self._repo.session.refresh(address)
        return AddressRead.model_validate(address)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_address(self, payload: AddressCreate) -> AddressRead:
        self._check_owner(payload.user_uuid, payload.sensor_uuid)

        address = self._repo.create(**payload.model_dump())
        result = self._commit(address)

        logger.info("address_created", uuid=str(address.uuid), city=address.city)
        return result

    def list_addresses(self) -> List[AddressRead]:
        return [AddressRead.model_validate(a) for a in self._repo.list_all()]

    def get_address(self, address_uuid: UUID) -> AddressRead:
        return AddressRead.model_validate(self._get_or_404(address_uuid))

    def update_address(self, address_uuid: UUID, payload: AddressUpdate) -> AddressRead:
        """
        Patch the given fields. When the owner columns are touched, the
        merged record must still have exactly one owner.
        """
        address = self._get_or_404(address_uuid)
        changes = payload.changes()

        if "user_uuid" in changes or "sensor_uuid" in changes:
            self._check_owner(
                changes.get("user_uuid", address.user_uuid),
                changes.get("sensor_uuid", address.sensor_uuid),
            )

        if changes:
            self._repo.update_fields(address, changes)
            logger.info("address_updated", uuid=str(address.uuid), fields=sorted(changes))
        return self._commit(address)

    def delete_address(self, address_uuid: UUID) -> None:
        """
        Delete an address. Users pointing at it lose their address; an
        address that still hosts sensors cannot be deleted.
        """
        address = self._get_or_404(address_uuid)

        sensor_count = self._repo.count_sensors(address)
        if sensor_count:
            raise AddressInUseError(address_uuid, sensor_count)

        self._repo.delete(address)
        self._repo.session.commit()
        logger.info("address_deleted", uuid=str(address_uuid))

    def search_addresses(self, criteria: AddressSearch) -> List[AddressRead]:
        return [AddressRead.model_validate(a) for a in self._repo.search(criteria)]


__all__ = ["AddressesService"]
