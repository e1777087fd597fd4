# --- File: hostel_core/schemas/room/room_response.py ---
"""
Room response schemas.
"""

from typing import List

from pydantic import Field, computed_field

from hostel_core.models.base.enums import BedStatus, RoomType
from hostel_core.schemas.common.base import BaseResponseSchema, BaseSchema
from hostel_core.schemas.room.bed_response import BedResponse

__all__ = [
    "RoomResponse",
    "RoomResizeResult",
]


class RoomResponse(BaseResponseSchema):
    """Room with its beds in label order."""

    property_id: str = Field(..., description="Owning property ID")
    room_number: str = Field(..., description="Room number")
    floor_number: int = Field(..., description="Floor number")
    room_type: RoomType = Field(..., description="Room type")
    capacity: int = Field(..., ge=0, description="Room capacity")
    version: int = Field(..., description="Optimistic lock version")
    beds: List[BedResponse] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occupied_beds(self) -> int:
        return sum(1 for bed in self.beds if bed.status == BedStatus.OCCUPIED)


class RoomResizeResult(BaseSchema):
    """Outcome of a capacity change: the room and any beds created for it."""

    room: RoomResponse
    created_beds: List[BedResponse] = Field(default_factory=list)
