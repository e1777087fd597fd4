# hostel_core/repositories/room/room_repository.py
"""
Room repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_core.models.room import Room
from hostel_core.repositories.base.base_repository import BaseRepository


class RoomRepository(BaseRepository[Room]):
    """Repository for Room entity; rooms are unique by property and number."""

    def __init__(self, session: Session):
        super().__init__(Room, session)

    def find_by_number(self, property_id: str, room_number: str) -> Optional[Room]:
        return self.find_one_by_criteria(
            {"property_id": property_id, "room_number": room_number}
        )
