"""
Property model: a physical hostel building owning rooms.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_core.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from hostel_core.models.room.room import Room

__all__ = ["Property"]


class Property(TimestampModel):
    """Hostel property with its floors and rooms."""

    __tablename__ = "properties"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    total_floors: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    rooms: Mapped[List["Room"]] = relationship(
        "Room",
        back_populates="hostel_property",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Room.room_number",
    )

    __table_args__ = (
        CheckConstraint("total_floors >= 1", name="ck_property_total_floors_positive"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name})>"
