"""
Payment model: the single payment recorded against a booking.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hostel_core.models.base.base_model import TimestampModel, utcnow
from hostel_core.models.base.enums import PaymentMethod
from hostel_core.models.base.validators import coerce_enum

if TYPE_CHECKING:
    from hostel_core.models.booking.booking import Booking

__all__ = ["Payment"]


class Payment(TimestampModel):
    """Payment linked one-to-one with a booking."""

    __tablename__ = "payments"

    booking_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    method: Mapped[PaymentMethod] = mapped_column(
        Enum(PaymentMethod, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
    transaction_ref: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    paid_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    booking: Mapped["Booking"] = relationship("Booking", back_populates="payment")

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_payment_amount_positive"),
    )

    @validates("method")
    def validate_method(self, key, value):
        return coerce_enum(PaymentMethod, value, key)

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, amount={self.amount}, method={self.method})>"
