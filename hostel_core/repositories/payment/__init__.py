# hostel_core/repositories/payment/__init__.py
"""
Payment repositories package.
"""

from hostel_core.repositories.payment.payment_repository import PaymentRepository

__all__ = [
    "PaymentRepository",
]
