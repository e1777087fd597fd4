# hostel_core/models/room/room.py
"""
Room model with capacity tracking.

A room belongs to a property and owns its beds. Capacity bounds how
many beds the room may grow to; it can never drop below the number
of occupied beds.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import (
    CheckConstraint,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hostel_core.models.base.base_model import TimestampModel
from hostel_core.models.base.enums import RoomType
from hostel_core.models.base.validators import coerce_enum

if TYPE_CHECKING:
    from hostel_core.models.hostel.property import Property
    from hostel_core.models.room.bed import Bed

__all__ = ["Room"]


class Room(TimestampModel):
    """
    Room entity within a property.

    The version column is an optimistic lock: concurrent flushes of
    the same room raise StaleDataError instead of overwriting.
    """

    __tablename__ = "rooms"

    property_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_number: Mapped[str] = mapped_column(String(50), nullable=False)
    floor_number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    room_type: Mapped[RoomType] = mapped_column(
        Enum(RoomType, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=RoomType.STANDARD,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    hostel_property: Mapped["Property"] = relationship("Property", back_populates="rooms")
    beds: Mapped[List["Bed"]] = relationship(
        "Bed",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Bed.label_index",
    )

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        UniqueConstraint("property_id", "room_number", name="uq_room_property_number"),
        CheckConstraint("capacity >= 0", name="ck_room_capacity_non_negative"),
        Index("ix_room_property_floor", "property_id", "floor_number"),
    )

    @validates("room_type")
    def validate_room_type(self, key, value):
        return coerce_enum(RoomType, value, key)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.room_number}, capacity={self.capacity})>"
