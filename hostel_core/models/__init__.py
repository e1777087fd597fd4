"""
Database models package.

Importing this package registers every table with ``Base.metadata``.
"""

from hostel_core.models.base import Base, BaseModel, TimestampModel
from hostel_core.models.booking import Booking
from hostel_core.models.complaint import Complaint
from hostel_core.models.hostel import Property
from hostel_core.models.payment import Payment
from hostel_core.models.room import Bed, Room
from hostel_core.models.student import Student
from hostel_core.models.system import StoreRevision
from hostel_core.models.user import User

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "Bed",
    "Booking",
    "Complaint",
    "Payment",
    "Property",
    "Room",
    "StoreRevision",
    "Student",
    "User",
]
