# hostel_core/models/room/bed.py
"""
Bed model: the smallest allocatable unit of occupancy.

A bed is OCCUPIED exactly when it references a current student. The
check constraint keeps that pairing true in the database itself, and
the unique index on current_student_id stops one student holding two
beds at once.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    Enum,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hostel_core.models.base.base_model import TimestampModel
from hostel_core.models.base.enums import BedStatus
from hostel_core.models.base.validators import coerce_enum

if TYPE_CHECKING:
    from hostel_core.models.room.room import Room
    from hostel_core.models.student.student import Student

__all__ = ["Bed"]


class Bed(TimestampModel):
    """
    Individual bed within a room.

    ``label`` is the seat letter (A, B, ... Z, AA, AB, ...) and
    ``label_index`` its zero-based position, used for ordering.
    """

    __tablename__ = "beds"

    room_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    label: Mapped[str] = mapped_column(String(10), nullable=False)
    label_index: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[BedStatus] = mapped_column(
        Enum(BedStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=BedStatus.AVAILABLE,
        index=True,
    )
    current_student_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="RESTRICT"),
        nullable=True,
        unique=True,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    room: Mapped["Room"] = relationship("Room", back_populates="beds")
    current_student: Mapped[Optional["Student"]] = relationship(
        "Student",
        back_populates="bed",
    )

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        UniqueConstraint("room_id", "label", name="uq_bed_room_label"),
        CheckConstraint(
            "(status = 'OCCUPIED' AND current_student_id IS NOT NULL) "
            "OR (status = 'AVAILABLE' AND current_student_id IS NULL)",
            name="ck_bed_status_matches_student",
        ),
    )

    @validates("status")
    def validate_status(self, key, value):
        return coerce_enum(BedStatus, value, key)

    def __repr__(self) -> str:
        return f"<Bed(id={self.id}, label={self.label}, status={self.status})>"
