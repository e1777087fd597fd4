# --- File: hostel_core/schemas/student/onboarding.py ---
"""
Onboarding request and result schemas.

An onboarding request carries everything needed to register a resident
in one step: profile, target bed, billing plan and the payment taken.
"""

from datetime import date as Date
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from hostel_core.models.base.enums import BookingFrequency, PaymentMethod
from hostel_core.schemas.booking.booking_response import BookingResponse
from hostel_core.schemas.common.base import BaseCreateSchema, BaseSchema
from hostel_core.schemas.payment.payment_response import PaymentResponse
from hostel_core.schemas.room.bed_response import BedResponse
from hostel_core.schemas.student.student_base import StudentProfile
from hostel_core.schemas.student.student_response import StudentResponse

__all__ = [
    "OnboardingRequest",
    "OnboardingResult",
]


class OnboardingRequest(BaseCreateSchema):
    """
    Resident registration request.

    ``total_amount`` is scoped to ``frequency``: the yearly total for
    YEARLY, the monthly amount for MONTHLY and the whole-period amount
    for EXCEPTION bookings.
    """

    profile: StudentProfile
    bed_id: str = Field(..., min_length=1, description="Bed selected for the resident")
    frequency: BookingFrequency = Field(..., description="Billing frequency")
    start_date: Date = Field(..., description="Booking start date")
    end_date: Date = Field(..., description="Booking end date")
    total_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    payment_method: PaymentMethod = Field(..., description="How the payment was taken")
    transaction_ref: Optional[str] = Field(default=None, max_length=100)

    @model_validator(mode="after")
    def validate_dates(self) -> "OnboardingRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class OnboardingResult(BaseSchema):
    """Records created by a successful onboarding."""

    student: StudentResponse
    booking: BookingResponse
    payment: PaymentResponse
    bed: BedResponse
