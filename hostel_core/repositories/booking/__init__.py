# hostel_core/repositories/booking/__init__.py
"""
Booking repositories package.
"""

from hostel_core.repositories.booking.booking_repository import BookingRepository

__all__ = [
    "BookingRepository",
]
