"""
Payment and billing services.
"""

from hostel_core.services.payment.billing_service import BillingService

__all__ = ["BillingService"]
