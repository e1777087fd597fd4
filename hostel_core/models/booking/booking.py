"""
Booking model: the billing plan of a resident.

``total_amount`` is scoped to ``frequency``: a YEARLY booking stores the
yearly total, a MONTHLY booking the monthly amount, an EXCEPTION booking
the amount for its whole date range.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hostel_core.models.base.base_model import TimestampModel
from hostel_core.models.base.enums import BookingFrequency, BookingStatus
from hostel_core.models.base.validators import coerce_enum
from hostel_core.utils.rent import monthly_rent

if TYPE_CHECKING:
    from hostel_core.models.payment.payment import Payment
    from hostel_core.models.student.student import Student

__all__ = ["Booking"]


class Booking(TimestampModel):
    """Billing booking linking a student to a frequency, period and amount."""

    __tablename__ = "bookings"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    frequency: Mapped[BookingFrequency] = mapped_column(
        Enum(BookingFrequency, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=BookingStatus.ACTIVE,
    )
    terminated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    student: Mapped["Student"] = relationship("Student", back_populates="bookings")
    payment: Mapped[Optional["Payment"]] = relationship(
        "Payment",
        back_populates="booking",
        uselist=False,
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_booking_dates_ordered"),
        CheckConstraint("total_amount > 0", name="ck_booking_amount_positive"),
        Index("ix_booking_student_status", "student_id", "status"),
    )

    @validates("frequency")
    def validate_frequency(self, key, value):
        return coerce_enum(BookingFrequency, value, key)

    @validates("status")
    def validate_status(self, key, value):
        return coerce_enum(BookingStatus, value, key)

    @property
    def is_open(self) -> bool:
        return self.status == BookingStatus.ACTIVE

    @property
    def monthly_rent(self) -> Decimal:
        """Effective monthly rent derived from the frequency-scoped total."""
        return monthly_rent(self.frequency, self.total_amount, self.start_date, self.end_date)

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, frequency={self.frequency}, status={self.status})>"
