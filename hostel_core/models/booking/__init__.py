"""Booking models."""

from hostel_core.models.booking.booking import Booking

__all__ = ["Booking"]
