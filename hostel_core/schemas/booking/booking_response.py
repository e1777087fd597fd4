# --- File: hostel_core/schemas/booking/booking_response.py ---
"""
Booking response schemas.
"""

from datetime import date as Date, datetime
from decimal import Decimal
from typing import Union

from pydantic import Field

from hostel_core.models.base.enums import BookingFrequency, BookingStatus
from hostel_core.schemas.common.base import BaseResponseSchema

__all__ = [
    "BookingResponse",
]


class BookingResponse(BaseResponseSchema):
    """
    Booking as stored, plus the derived monthly rent.

    ``total_amount`` is scoped to ``frequency``; ``monthly_rent`` is the
    normalized per-month figure.
    """

    student_id: str = Field(..., description="Student ID")
    frequency: BookingFrequency = Field(..., description="Billing frequency")
    start_date: Date = Field(..., description="Booking start date")
    end_date: Date = Field(..., description="Booking end date")
    total_amount: Decimal = Field(..., max_digits=12, decimal_places=2)
    status: BookingStatus = Field(..., description="Booking status")
    terminated_at: Union[datetime, None] = Field(default=None)
    monthly_rent: Decimal = Field(..., description="Derived monthly rent")
