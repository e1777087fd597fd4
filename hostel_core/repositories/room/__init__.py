# hostel_core/repositories/room/__init__.py
"""
Room repositories package.
"""

from hostel_core.repositories.room.bed_repository import BedRepository
from hostel_core.repositories.room.room_repository import RoomRepository

__all__ = [
    "RoomRepository",
    "BedRepository",
]
