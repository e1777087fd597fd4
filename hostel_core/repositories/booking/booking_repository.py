# hostel_core/repositories/booking/booking_repository.py
"""
Booking repository.
"""

from typing import List

from sqlalchemy.orm import Session

from hostel_core.models.base.enums import BookingStatus
from hostel_core.models.booking import Booking
from hostel_core.repositories.base.base_repository import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """Repository for Booking entity."""

    def __init__(self, session: Session):
        super().__init__(Booking, session)

    def find_active_by_student(self, student_id: str) -> List[Booking]:
        """Open bookings of a student, newest first."""
        return self.find_by_criteria(
            {"student_id": student_id, "status": BookingStatus.ACTIVE},
            order_by=["-start_date"],
        )
