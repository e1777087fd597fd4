# --- File: hostel_core/schemas/payment/payment_response.py ---
"""
Payment response schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Union

from pydantic import Field

from hostel_core.models.base.enums import PaymentMethod
from hostel_core.schemas.common.base import BaseResponseSchema

__all__ = [
    "PaymentResponse",
]


class PaymentResponse(BaseResponseSchema):
    """Payment recorded against a booking."""

    booking_id: str = Field(..., description="Booking ID")
    amount: Decimal = Field(..., max_digits=12, decimal_places=2)
    method: PaymentMethod = Field(..., description="Payment method")
    transaction_ref: Union[str, None] = Field(default=None)
    paid_at: datetime = Field(..., description="Payment timestamp")
