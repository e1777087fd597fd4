# --- File: hostel_core/schemas/hostel/snapshot.py ---
"""
Immutable, versioned views of the Property -> Room -> Bed graph.

A GraphSnapshot is read in one transaction, so every figure derived
from it is mutually consistent. ``revision`` is the store revision the
snapshot reflects; two snapshots with the same revision are identical.
"""

from datetime import datetime
from typing import Iterator, Optional, Tuple, Union

from pydantic import Field

from hostel_core.models.base.enums import BedStatus, RoomType
from hostel_core.schemas.common.base import FrozenSchema

__all__ = [
    "BedSnapshot",
    "RoomSnapshot",
    "PropertySnapshot",
    "GraphSnapshot",
]


class BedSnapshot(FrozenSchema):
    id: str
    room_id: str
    label: str
    label_index: int
    status: BedStatus
    current_student_id: Union[str, None] = None
    version: int


class RoomSnapshot(FrozenSchema):
    id: str
    property_id: str
    room_number: str
    floor_number: int
    room_type: RoomType
    capacity: int
    version: int
    beds: Tuple[BedSnapshot, ...] = ()

    @property
    def occupied_count(self) -> int:
        return sum(1 for bed in self.beds if bed.status == BedStatus.OCCUPIED)


class PropertySnapshot(FrozenSchema):
    id: str
    name: str
    address: Union[str, None] = None
    total_floors: int
    rooms: Tuple[RoomSnapshot, ...] = ()

    def iter_beds(self) -> Iterator[BedSnapshot]:
        for room in self.rooms:
            yield from room.beds


class GraphSnapshot(FrozenSchema):
    """Whole occupancy graph (or one property of it) at one revision."""

    revision: int = Field(..., ge=0)
    taken_at: datetime
    properties: Tuple[PropertySnapshot, ...] = ()

    def iter_rooms(self) -> Iterator[RoomSnapshot]:
        for prop in self.properties:
            yield from prop.rooms

    def iter_beds(self) -> Iterator[BedSnapshot]:
        for prop in self.properties:
            yield from prop.iter_beds()

    def find_room(self, room_id: str) -> Optional[RoomSnapshot]:
        return next((room for room in self.iter_rooms() if room.id == room_id), None)

    def find_bed(self, bed_id: str) -> Optional[BedSnapshot]:
        return next((bed for bed in self.iter_beds() if bed.id == bed_id), None)
