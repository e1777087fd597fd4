# --- File: hostel_core/schemas/payment/payment_base.py ---
"""
Payment input schemas.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from hostel_core.models.base.enums import PaymentMethod
from hostel_core.schemas.common.base import BaseUpdateSchema

__all__ = [
    "PaymentUpdate",
]


class PaymentUpdate(BaseUpdateSchema):
    """
    Partial update of a payment.

    ``transaction_ref`` may be cleared with None or a blank string;
    ``method`` is required on every payment and cannot be cleared.
    """

    method: Optional[PaymentMethod] = Field(default=None)
    transaction_ref: Optional[str] = Field(default=None, max_length=100)

    @field_validator("method", mode="before")
    @classmethod
    def reject_null_method(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Payment method cannot be cleared")
        return v

    @field_validator("transaction_ref")
    @classmethod
    def normalize_transaction_ref(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
