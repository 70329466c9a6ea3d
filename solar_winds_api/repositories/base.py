# solar_winds_api/repositories/base.py

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session

from ..db.models import Base

ModelT = TypeVar("ModelT", bound=Base)


LIKE_ESCAPE = "\\"


def like_pattern(value: str) -> str:
    """
    Substring pattern for ``ilike``. ``%`` and ``_`` in ``value`` match
    literally when the pattern is used with ``escape=LIKE_ESCAPE``.
    """
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def ilike_contains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive ``column CONTAINS value``."""
    return column.ilike(like_pattern(value), escape=LIKE_ESCAPE)


class BaseRepository(Generic[ModelT]):
    """
    Thin data-access layer shared by the resource repositories.

    Subclasses set ``model`` and may override ``_base_select`` to eager-load
    the relations their responses embed. Write methods flush but never
    commit; the service owns the transaction.
    """

    model: Type[ModelT]

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(self.model)

    def _all(self, stmt: Select[Any]) -> list[ModelT]:
        result = self.session.execute(stmt)
        return list(result.scalars().unique().all())

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_by_id(self, uuid: UUID) -> Optional[ModelT]:
        """
        Fetch a single row by primary key, or None if it does not exist.
        """
        stmt = self._base_select().where(self.model.uuid == uuid)
        return self.session.execute(stmt).scalars().first()

    def exists(self, uuid: UUID) -> bool:
        stmt = select(func.count()).select_from(self.model).where(self.model.uuid == uuid)
        return bool(self.session.execute(stmt).scalar_one())

    def count(self, *criteria: ColumnElement[bool]) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return int(self.session.execute(stmt).scalar_one())

    def list_all(self) -> Sequence[ModelT]:
        stmt = self._base_select().order_by(self.model.created_at.desc())
        return self._all(stmt)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, **fields: Any) -> ModelT:
        """
        Create and persist a new row.
        """
        instance = self.model(**fields)
        self.session.add(instance)
        self.session.flush()
        return instance

    def update_fields(self, instance: ModelT, fields: Mapping[str, Any]) -> ModelT:
        """
        Apply the given column updates to ``instance`` and flush.
        """
        for key, value in fields.items():
            setattr(instance, key, value)

        self.session.add(instance)
        self.session.flush()
        return instance

    def delete(self, instance: ModelT) -> None:
        self.session.delete(instance)
        self.session.flush()

    def delete_all(self) -> int:
        """
        Delete every row of the table in one statement. Returns the row count.
        """
        result = self.session.execute(self.model.__table__.delete())
        return int(result.rowcount or 0)


__all__ = ["BaseRepository", "LIKE_ESCAPE", "ilike_contains", "like_pattern"]
