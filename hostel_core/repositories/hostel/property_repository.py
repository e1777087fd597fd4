# hostel_core/repositories/hostel/property_repository.py
"""
Property repository, including the full occupancy graph load.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from hostel_core.models.hostel import Property
from hostel_core.models.room import Room
from hostel_core.repositories.base.base_repository import BaseRepository


class PropertyRepository(BaseRepository[Property]):
    """Repository for Property entity."""

    def __init__(self, session: Session):
        super().__init__(Property, session)

    def load_graph(self, property_id: Optional[str] = None) -> List[Property]:
        """
        Properties with rooms and beds loaded in the current transaction.

        Args:
            property_id: Restrict to one property

        Returns:
            Properties ordered by name
        """
        stmt = select(Property).options(
            selectinload(Property.rooms).selectinload(Room.beds)
        )
        if property_id is not None:
            stmt = stmt.where(Property.id == property_id)
        return list(self.session.scalars(stmt.order_by(Property.name, Property.id)))
