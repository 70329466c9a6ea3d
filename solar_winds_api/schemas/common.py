# solar_winds_api/schemas/common.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, FrozenSet, Mapping, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for response schemas.

    - from_attributes lets services validate ORM rows directly
    - populate_by_name accepts field names as well as aliases
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class RequestModel(BaseModel):
    """
    Base model for request bodies.

    Extra fields are forbidden so the frontend gets early feedback on typos.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PatchModel(RequestModel):
    """
    Base model for partial updates.

    Every field is optional; only fields present in the body are applied.
    An explicit ``null`` is only accepted for fields listed in
    ``nullable_fields``; clearing a required column is a validation error.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required(self) -> "PatchModel":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """
        Fields explicitly sent by the client, ready to assign on a model.
        """
        return self.model_dump(exclude_unset=True)


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorResponse(APIModel):
    """
    Error body returned for 4xx responses raised by the API itself.
    """

    detail: str = Field(..., description="Human-readable explanation of the error.")
    code: Optional[str] = Field(
        default=None,
        description="Stable, machine-readable error code (e.g. 'duplicate', 'not_found').",
    )
    details: Optional[Mapping[str, Any]] = Field(
        default=None,
        description="Optional structured details.",
    )


__all__ = [
    "APIModel",
    "RequestModel",
    "PatchModel",
    "UTCDateTime",
    "as_utc",
    "ErrorResponse",
]
