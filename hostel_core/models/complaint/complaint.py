"""
Complaint model with status lifecycle.

``resolved_at`` is only set once the complaint enters RESOLVED, which is
terminal. The check constraint mirrors that rule in the database.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hostel_core.models.base.base_model import TimestampModel
from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus
from hostel_core.models.base.validators import coerce_enum

if TYPE_CHECKING:
    from hostel_core.models.room.room import Room
    from hostel_core.models.student.student import Student

__all__ = ["Complaint"]


class Complaint(TimestampModel):
    """Maintenance complaint raised against a room."""

    __tablename__ = "complaints"

    category: Mapped[ComplaintCategory] = mapped_column(
        Enum(ComplaintCategory, native_enum=False, length=30, validate_strings=True),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ComplaintStatus] = mapped_column(
        Enum(ComplaintStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=ComplaintStatus.OPEN,
    )
    room_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    resolved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    room: Mapped["Room"] = relationship("Room")
    student: Mapped[Optional["Student"]] = relationship("Student", back_populates="complaints")

    __table_args__ = (
        CheckConstraint(
            "(status = 'RESOLVED') = (resolved_at IS NOT NULL)",
            name="ck_complaint_resolved_at",
        ),
        Index("ix_complaint_status_created", "status", "created_at"),
    )

    @validates("category")
    def validate_category(self, key, value):
        return coerce_enum(ComplaintCategory, value, key)

    @validates("status")
    def validate_status(self, key, value):
        return coerce_enum(ComplaintStatus, value, key)

    @property
    def is_resolved(self) -> bool:
        return self.status == ComplaintStatus.RESOLVED

    def __repr__(self) -> str:
        return f"<Complaint(id={self.id}, category={self.category}, status={self.status})>"
