"""Payment models."""

from hostel_core.models.payment.payment import Payment

__all__ = ["Payment"]
