# solar_winds_api/services/users_service.py

from __future__ import annotations

from typing import List
from uuid import UUID

from solar_winds_api.db import models
from solar_winds_api.exceptions import DuplicateError, NotFoundError
from solar_winds_api.logging import get_logger
from solar_winds_api.repositories.addresses import AddressesRepository
from solar_winds_api.repositories.users import UsersRepository
from solar_winds_api.schemas.users import UserCreate, UserRead, UserSearch, UserUpdate

logger = get_logger(__name__)


class UsersService:
    """
    High-level service for users.

    Responsibilities:
    - Enforce document uniqueness, the existence of a referenced address
      and one user per address.
    - Delegate persistence to `UsersRepository` and own the transaction.
    - Convert ORM rows to API schemas (`UserRead`).
    """

    def __init__(self, repo: UsersRepository) -> None:
        self._repo = repo
        self._addresses = AddressesRepository(repo.session)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_or_404(self, user_uuid: UUID) -> models.User:
        user = self._repo.get_by_id(user_uuid)
        if user is None:
            raise NotFoundError("User", "UUID", user_uuid)
        return user

    def _ensure_document_free(self, document: str) -> None:
        if self._repo.get_by_document(document) is not None:
            logger.info("user_rejected_duplicate_document", document=document)
            raise DuplicateError("User", "document")

    def _ensure_address_exists(self, address_uuid: UUID) -> None:
        if not self._addresses.exists(address_uuid):
            raise NotFoundError("Address", "UUID", address_uuid)

    def _ensure_address_free(self, address_uuid: UUID) -> None:
        if self._repo.get_by_address(address_uuid) is not None:
            logger.info("user_rejected_taken_address", address_uuid=str(address_uuid))
            raise DuplicateError("User", "address_uuid")

    def _commit(self, user: models.User) -> UserRead:
        self._repo.session.commit()
        self._repo.session.refresh(user)
        return UserRead.model_validate(user)

    # -------------------------------------------------------------------------
    # Core CRUD operations
    # -------------------------------------------------------------------------

    def create_user(self, payload: UserCreate) -> UserRead:
        """
        Create a new user. The document and the address must not be in use.
        """
        self._ensure_document_free(payload.document)
        if payload.address_uuid is not None:
            self._ensure_address_exists(payload.address_uuid)
            self._ensure_address_free(payload.address_uuid)

        user = self._repo.create(**payload.model_dump())
        result = self._commit(user)

        logger.info("user_created", uuid=str(user.uuid), document=user.document)
        return result

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self._repo.list_all()]

    def get_user(self, user_uuid: UUID) -> UserRead:
        return UserRead.model_validate(self._get_or_404(user_uuid))

    def update_user(self, user_uuid: UUID, payload: UserUpdate) -> UserRead:
        """
        Patch only the fields present in ``payload``.
        """
        user = self._get_or_404(user_uuid)
        changes = payload.changes()

        document = changes.get("document")
        if document and document != user.document:
            self._ensure_document_free(document)
        address_uuid = changes.get("address_uuid")
        if address_uuid is not None and address_uuid != user.address_uuid:
            self._ensure_address_exists(address_uuid)
            self._ensure_address_free(address_uuid)

        if changes:
            self._repo.update_fields(user, changes)
            logger.info("user_updated", uuid=str(user.uuid), fields=sorted(changes))
        return self._commit(user)

    def delete_user(self, user_uuid: UUID) -> None:
        """
        Delete a user. Sensors it owned are kept and become unowned.
        """
        user = self._get_or_404(user_uuid)
        self._repo.delete(user)
        self._repo.session.commit()
        logger.info("user_deleted", uuid=str(user_uuid))

    def search_users(self, criteria: UserSearch) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self._repo.search(criteria)]


__all__ = ["UsersService"]
