# --- File: hostel_core/schemas/common/base.py ---
"""
Schema base classes shared by requests, responses and snapshots.

Responses are built from ORM rows with ``model_validate(row)`` while the
owning session is still open; nothing returned to callers keeps a
reference to a live row.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "FrozenSchema",
    "TimestampMixin",
    "UUIDMixin",
    "BaseDBSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """Reads attributes from ORM rows and strips incoming strings."""

    model_config = ConfigDict(
        from_attributes=True,
        # Enum members, not raw strings, so comparisons against model enums hold
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class FrozenSchema(BaseSchema):
    """Read-only value; assignment raises."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)


class TimestampMixin(BaseModel):
    created_at: datetime = Field(..., description="When the row was inserted")
    updated_at: datetime = Field(..., description="When the row last changed")


class UUIDMixin(BaseModel):
    id: str = Field(..., description="Entity id (UUID string)")


class BaseDBSchema(BaseSchema, UUIDMixin, TimestampMixin):
    """Persisted entity: id plus row timestamps."""


class BaseCreateSchema(BaseSchema):
    """Input for creating an entity; ids and timestamps are assigned by the store."""


class BaseUpdateSchema(BaseSchema):
    """
    Partial update input.

    Only fields the caller passes are applied (``model_dump(exclude_unset=True)``);
    unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")


class BaseResponseSchema(BaseDBSchema):
    """Entity state returned from a service call."""
