# solar_winds_api/routers/addresses.py

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from solar_winds_api.db.session import get_session
from solar_winds_api.repositories.addresses import AddressesRepository
from solar_winds_api.schemas.common import ErrorResponse
from solar_winds_api.schemas.addresses import (
    AddressCreate,
    AddressRead,
    AddressSearch,
    AddressUpdate,
)
from solar_winds_api.services.addresses_service import AddressesService

router = APIRouter(
    prefix="/addresses",
    tags=["addresses"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


def get_addresses_service(session: Session = Depends(get_session)) -> AddressesService:
    return AddressesService(AddressesRepository(session))


@router.post(
    "",
    response_model=AddressRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an address",
    description=(
        "Create a postal address. Exactly one of `user_uuid` (a home address) "
        "or `sensor_uuid` (an equipment address) must be set."
    ),
)
def create_address(
    *,
    payload: AddressCreate,
    service: AddressesService = Depends(get_addresses_service),
) -> AddressRead:
    return service.create_address(payload)


@router.get("", response_model=List[AddressRead], summary="List addresses")
def list_addresses(
    service: AddressesService = Depends(get_addresses_service),
) -> List[AddressRead]:
    return service.list_addresses()


@router.post("/search", response_model=List[AddressRead], summary="Search addresses")
def search_addresses(
    *,
    criteria: AddressSearch,
    service: AddressesService = Depends(get_addresses_service),
) -> List[AddressRead]:
    return service.search_addresses(criteria)


@router.get("/{address_uuid}", response_model=AddressRead, summary="Get a single address")
def get_address(
    *,
    address_uuid: UUID,
    service: AddressesService = Depends(get_addresses_service),
) -> AddressRead:
    return service.get_address(address_uuid)


@router.patch("/{address_uuid}", response_model=AddressRead, summary="Update an address")
def update_address(
    *,
    address_uuid: UUID,
    payload: AddressUpdate,
    service: AddressesService = Depends(get_addresses_service),
) -> AddressRead:
    return service.update_address(address_uuid, payload)


@router.delete(
    "/{address_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an address",
    description="Fails with 409 while sensors are still installed at the address.",
)
def delete_address(
    *,
    address_uuid: UUID,
    service: AddressesService = Depends(get_addresses_service),
) -> None:
    service.delete_address(address_uuid)
