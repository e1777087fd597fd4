# hostel_core/repositories/student/student_repository.py
"""
Student repository.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from hostel_core.models.booking import Booking
from hostel_core.models.student import Student
from hostel_core.repositories.base.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Repository for Student entity."""

    def __init__(self, session: Session):
        super().__init__(Student, session)

    def find_residents(self, active_only: bool = True) -> List[Student]:
        """
        Students with their bed, bookings and payments eagerly loaded.

        Args:
            active_only: Skip deactivated students

        Returns:
            Students ordered by name
        """
        stmt = select(Student).options(
            selectinload(Student.bed),
            selectinload(Student.bookings).selectinload(Booking.payment),
        )
        if active_only:
            stmt = stmt.where(Student.is_active.is_(True))
        return list(self.session.scalars(stmt.order_by(Student.name, Student.id)))
