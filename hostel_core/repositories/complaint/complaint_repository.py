# hostel_core/repositories/complaint/complaint_repository.py
"""
Complaint repository with filtered listing.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus
from hostel_core.models.complaint import Complaint
from hostel_core.repositories.base.base_repository import BaseRepository


class ComplaintRepository(BaseRepository[Complaint]):
    """Repository for Complaint entity."""

    def __init__(self, session: Session):
        super().__init__(Complaint, session)

    def find_filtered(
        self,
        status: Optional[ComplaintStatus] = None,
        category: Optional[ComplaintCategory] = None,
        room_id: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> List[Complaint]:
        """
        Complaints matching all given filters, newest first.

        Args:
            status: Lifecycle status
            category: Complaint category
            room_id: Room the complaint was raised against
            student_id: Reporting student

        Returns:
            Matching complaints
        """
        stmt = select(Complaint)
        if status is not None:
            stmt = stmt.where(Complaint.status == status)
        if category is not None:
            stmt = stmt.where(Complaint.category == category)
        if room_id is not None:
            stmt = stmt.where(Complaint.room_id == room_id)
        if student_id is not None:
            stmt = stmt.where(Complaint.student_id == student_id)
        stmt = stmt.order_by(Complaint.created_at.desc(), Complaint.id)
        return list(self.session.scalars(stmt))

    def count_by_status(self, status: ComplaintStatus) -> int:
        return self.count({"status": status})
