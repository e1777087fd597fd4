"""
Base models package.

Provides the declarative base, abstract models, validators
and enums for all database models.
"""

from hostel_core.models.base.base_model import (
    Base,
    BaseModel,
    TimestampModel,
    utcnow,
)

from hostel_core.models.base.enums import (
    BedStatus,
    BookingFrequency,
    BookingStatus,
    ComplaintCategory,
    ComplaintStatus,
    PaymentMethod,
    RoomType,
    UserRole,
)

from hostel_core.models.base.validators import coerce_enum

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "utcnow",
    "BedStatus",
    "BookingFrequency",
    "BookingStatus",
    "ComplaintCategory",
    "ComplaintStatus",
    "PaymentMethod",
    "RoomType",
    "UserRole",
    "coerce_enum",
]
