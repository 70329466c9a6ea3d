# solar_winds_api/repositories/users.py

from __future__ import annotations

from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import selectinload

from ..db import models
from ..schemas.users import UserSearch
from .base import BaseRepository, ilike_contains


class UsersRepository(BaseRepository[models.User]):
    """
    Data-access layer around the User model.
    """

    model = models.User

    def _base_select(self) -> Select[Any]:
        return select(models.User).options(
            selectinload(models.User.address),
            selectinload(models.User.sensors),
        )

    def get_by_document(self, document: str) -> Optional[models.User]:
        stmt = select(models.User).where(models.User.document == document)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_by_address(self, address_uuid: UUID) -> Optional[models.User]:
        stmt = select(models.User).where(models.User.address_uuid == address_uuid)
        return self.session.execute(stmt).scalar_one_or_none()

    def search(self, criteria: UserSearch) -> Sequence[models.User]:
        """
        Filter users by the given criteria, newest first.

        Text filters are case-insensitive substring matches; ``search``
        matches any of name, last_name or document.
        """
        User = models.User
        stmt = self._base_select()

        if criteria.name:
            stmt = stmt.where(ilike_contains(User.name, criteria.name))
        if criteria.last_name:
            stmt = stmt.where(ilike_contains(User.last_name, criteria.last_name))
        if criteria.document:
            stmt = stmt.where(ilike_contains(User.document, criteria.document))
        if criteria.address_uuid:
            stmt = stmt.where(User.address_uuid == criteria.address_uuid)
        if criteria.search:
            stmt = stmt.where(
                or_(
                    ilike_contains(User.name, criteria.search),
                    ilike_contains(User.last_name, criteria.search),
                    ilike_contains(User.document, criteria.search),
                )
            )

        return self._all(stmt.order_by(User.created_at.desc()))


__all__ = ["UsersRepository"]
