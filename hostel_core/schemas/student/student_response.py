# --- File: hostel_core/schemas/student/student_response.py ---
"""
Student response schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Union

from pydantic import Field

from hostel_core.schemas.booking.booking_response import BookingResponse
from hostel_core.schemas.common.base import BaseResponseSchema, BaseSchema
from hostel_core.schemas.payment.payment_response import PaymentResponse
from hostel_core.schemas.room.bed_response import BedResponse

__all__ = [
    "StudentResponse",
    "ResidentView",
]


class StudentResponse(BaseResponseSchema):
    """Stored student profile."""

    name: str
    age: int
    phone_number: str
    email: Union[str, None] = None
    emergency_contact: str
    address: Union[str, None] = None
    is_active: bool


class ResidentView(BaseSchema):
    """
    A student together with where they sleep and what they pay.

    Location and billing fields are empty for a student with no bed
    or no open booking.
    """

    student: StudentResponse
    bed: Union[BedResponse, None] = None
    room_id: Union[str, None] = None
    room_number: Union[str, None] = None
    floor_number: Union[int, None] = None
    property_id: Union[str, None] = None
    booking: Union[BookingResponse, None] = None
    payment: Union[PaymentResponse, None] = None
    monthly_rent: Union[Decimal, None] = None
    payment_status: Literal["PAID", "PENDING"] = Field(default="PENDING")
    last_payment_at: Union[datetime, None] = None
