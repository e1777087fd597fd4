# --- File: hostel_core/schemas/common/__init__.py ---
"""
Common schema building blocks.
"""

from hostel_core.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    FrozenSchema,
    TimestampMixin,
    UUIDMixin,
)

__all__ = [
    "BaseCreateSchema",
    "BaseDBSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "FrozenSchema",
    "TimestampMixin",
    "UUIDMixin",
]
