# solar_winds_api/routers/users.py

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from solar_winds_api.db.session import get_session
from solar_winds_api.repositories.users import UsersRepository
from solar_winds_api.schemas.common import ErrorResponse
from solar_winds_api.schemas.users import UserCreate, UserRead, UserSearch, UserUpdate
from solar_winds_api.services.users_service import UsersService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


def get_users_service(session: Session = Depends(get_session)) -> UsersService:
    """
    Dependency-injected factory for UsersService.
    """
    return UsersService(UsersRepository(session))


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Create a user. The document must be unique; `address_uuid` must exist when given.",
)
def create_user(
    *,
    payload: UserCreate,
    service: UsersService = Depends(get_users_service),
) -> UserRead:
    return service.create_user(payload)


@router.get(
    "",
    response_model=List[UserRead],
    summary="List users",
    description="Return every user with its address and sensors, newest first.",
)
def list_users(service: UsersService = Depends(get_users_service)) -> List[UserRead]:
    return service.list_users()


@router.post(
    "/search",
    response_model=List[UserRead],
    summary="Search users",
)
def search_users(
    *,
    criteria: UserSearch,
    service: UsersService = Depends(get_users_service),
) -> List[UserRead]:
    return service.search_users(criteria)


@router.get("/{user_uuid}", response_model=UserRead, summary="Get a single user")
def get_user(
    *,
    user_uuid: UUID,
    service: UsersService = Depends(get_users_service),
) -> UserRead:
    return service.get_user(user_uuid)


@router.patch(
    "/{user_uuid}",
    response_model=UserRead,
    summary="Update a user",
    description="Partial update: only the fields present in the body are written.",
)
def update_user(
    *,
    user_uuid: UUID,
    payload: UserUpdate,
    service: UsersService = Depends(get_users_service),
) -> UserRead:
    return service.update_user(user_uuid, payload)


@router.delete(
    "/{user_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    *,
    user_uuid: UUID,
    service: UsersService = Depends(get_users_service),
) -> None:
    service.delete_user(user_uuid)
