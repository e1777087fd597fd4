"""
Repository layer.

One repository per aggregate, all bound to the session of the
enclosing unit of work.
"""

from hostel_core.repositories.base import BaseRepository
from hostel_core.repositories.booking import BookingRepository
from hostel_core.repositories.complaint import ComplaintRepository
from hostel_core.repositories.hostel import PropertyRepository
from hostel_core.repositories.payment import PaymentRepository
from hostel_core.repositories.room import BedRepository, RoomRepository
from hostel_core.repositories.student import StudentRepository
from hostel_core.repositories.system import StoreRevisionRepository

__all__ = [
    "BaseRepository",
    "BedRepository",
    "BookingRepository",
    "ComplaintRepository",
    "PaymentRepository",
    "PropertyRepository",
    "RoomRepository",
    "StoreRevisionRepository",
    "StudentRepository",
]
