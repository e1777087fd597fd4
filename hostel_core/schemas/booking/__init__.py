# --- File: hostel_core/schemas/booking/__init__.py ---
"""
Booking schemas package.
"""

from hostel_core.schemas.booking.booking_response import BookingResponse

__all__ = [
    "BookingResponse",
]
