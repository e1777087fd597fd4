# --- File: hostel_core/schemas/room/__init__.py ---
"""
Room schemas package.

Example:
    from hostel_core.schemas.room import RoomCreate, RoomResponse
"""

from __future__ import annotations

from hostel_core.schemas.room.bed_response import BedResponse
from hostel_core.schemas.room.room_base import CapacityUpdate, RoomCreate
from hostel_core.schemas.room.room_response import RoomResizeResult, RoomResponse

__all__ = [
    "BedResponse",
    "CapacityUpdate",
    "RoomCreate",
    "RoomResizeResult",
    "RoomResponse",
]
