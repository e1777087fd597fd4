"""
Student (resident) model.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_core.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from hostel_core.models.booking.booking import Booking
    from hostel_core.models.complaint.complaint import Complaint
    from hostel_core.models.room.bed import Bed

__all__ = ["Student"]


class Student(TimestampModel):
    """Resident profile. At most one bed and one open booking at a time."""

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    emergency_contact: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    bed: Mapped[Optional["Bed"]] = relationship(
        "Bed",
        back_populates="current_student",
        uselist=False,
    )
    bookings: Mapped[List["Booking"]] = relationship(
        "Booking",
        back_populates="student",
        cascade="all, delete-orphan",
        order_by="Booking.start_date.desc()",
    )
    complaints: Mapped[List["Complaint"]] = relationship(
        "Complaint",
        back_populates="student",
    )

    __table_args__ = (
        CheckConstraint("age > 0", name="ck_student_age_positive"),
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name={self.name}, active={self.is_active})>"
