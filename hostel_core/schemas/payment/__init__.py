# --- File: hostel_core/schemas/payment/__init__.py ---
"""
Payment schemas package.
"""

from hostel_core.schemas.payment.payment_base import PaymentUpdate
from hostel_core.schemas.payment.payment_response import PaymentResponse

__all__ = [
    "PaymentResponse",
    "PaymentUpdate",
]
