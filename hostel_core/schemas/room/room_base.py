# --- File: hostel_core/schemas/room/room_base.py ---
"""
Room input schemas.
"""

from pydantic import Field

from hostel_core.models.base.enums import RoomType
from hostel_core.schemas.common.base import BaseCreateSchema

__all__ = [
    "RoomCreate",
    "CapacityUpdate",
]

class RoomCreate(BaseCreateSchema):
    """Room creation request, including the number of beds to provision."""

    property_id: str = Field(..., min_length=1, description="Owning property ID")
    room_number: str = Field(..., min_length=1, max_length=50, description="Room number")
    floor_number: int = Field(default=0, ge=0, description="Floor the room is on")
    room_type: RoomType = Field(default=RoomType.STANDARD, description="Room type")
    bed_count: int = Field(..., gt=0, description="Beds to create (labelled A..)")


class CapacityUpdate(BaseCreateSchema):
    """Target capacity for a room."""

    room_id: str = Field(..., min_length=1)
    new_capacity: int = Field(..., ge=0, description="New capacity (never below occupied beds)")
