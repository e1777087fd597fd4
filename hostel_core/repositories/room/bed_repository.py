# hostel_core/repositories/room/bed_repository.py
"""
Bed repository with occupancy operations.
"""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hostel_core.core.exceptions import ConflictError
from hostel_core.models.base.enums import BedStatus
from hostel_core.models.room import Bed
from hostel_core.repositories.base.base_repository import BaseRepository


class BedRepository(BaseRepository[Bed]):
    """
    Repository for Bed entity.

    Handles:
    - Bed lookup by occupant
    - Occupancy counts
    - Compare-and-set bed claims
    """

    def __init__(self, session: Session):
        super().__init__(Bed, session)

    def find_by_student(self, student_id: str) -> Optional[Bed]:
        """Bed currently held by a student, if any."""
        return self.find_one_by_criteria({"current_student_id": student_id})

    def count_occupied_in_room(self, room_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Bed)
            .where(Bed.room_id == room_id, Bed.status == BedStatus.OCCUPIED)
        )
        return self.session.scalar(stmt) or 0

    def claim(self, bed: Bed, student_id: str) -> bool:
        """
        Occupy ``bed`` for ``student_id`` only if it is still AVAILABLE.

        The status check and the write are one UPDATE statement, so a bed
        taken by another committed transaction is never overwritten.

        Returns:
            True if this call took the bed, False if it was already taken

        Raises:
            ConflictError: If the student already holds another bed
        """
        stmt = (
            update(Bed)
            .where(
                Bed.id == bed.id,
                Bed.status == BedStatus.AVAILABLE,
                Bed.current_student_id.is_(None),
            )
            .values(
                status=BedStatus.OCCUPIED,
                current_student_id=student_id,
                version=Bed.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(
                "Student already holds another bed",
                details={"bed_id": bed.id, "student_id": student_id},
            ) from exc

        self.session.refresh(bed)
        return result.rowcount == 1

    def release(self, bed: Bed) -> Bed:
        """Free a bed. The version column guards against a concurrent writer."""
        bed.status = BedStatus.AVAILABLE
        bed.current_student_id = None
        self.session.flush()
        return bed
