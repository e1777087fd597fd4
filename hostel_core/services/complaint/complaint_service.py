"""
Core complaint service: creation, status lifecycle and listings.

Status moves forward only: OPEN -> IN_PROGRESS -> RESOLVED, or straight
from OPEN to RESOLVED. RESOLVED is terminal and is the only state with
a resolved_at timestamp.
"""

from typing import Dict, FrozenSet, List, Optional, Union

from hostel_core.core.exceptions import ConflictError
from hostel_core.models.base.base_model import utcnow
from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus
from hostel_core.models.base.validators import coerce_enum
from hostel_core.models.complaint import Complaint
from hostel_core.schemas.complaint import ComplaintCreate, ComplaintFilter, ComplaintResponse
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.mapping import to_schema, to_schema_list
from hostel_core.services.common.unit_of_work import UnitOfWork

ALLOWED_TRANSITIONS: Dict[ComplaintStatus, FrozenSet[ComplaintStatus]] = {
    ComplaintStatus.OPEN: frozenset({ComplaintStatus.IN_PROGRESS, ComplaintStatus.RESOLVED}),
    ComplaintStatus.IN_PROGRESS: frozenset({ComplaintStatus.RESOLVED}),
    ComplaintStatus.RESOLVED: frozenset(),
}


class ComplaintService(BaseService):
    """
    High-level complaint operations service.

    Provides complaint creation, status transitions and filtered listings.
    """

    # -------------------------------------------------------------------------
    # Create & Update Operations
    # -------------------------------------------------------------------------

    def create_complaint(
        self,
        room_id: str,
        category: Union[ComplaintCategory, str],
        description: str,
        student_id: Optional[str] = None,
    ) -> ComplaintResponse:
        """
        Raise a new OPEN complaint against a room.

        Raises:
            ValidationError: Unknown category or empty description
            NotFoundError: Unknown room or student
        """
        request = self._validate(
            ComplaintCreate,
            {
                "room_id": room_id,
                "category": category,
                "description": description,
                "student_id": student_id,
            },
        )

        def op(uow: UnitOfWork) -> ComplaintResponse:
            room = uow.rooms.get_by_id(request.room_id)
            if request.student_id is not None:
                uow.students.get_by_id(request.student_id)
            complaint = uow.complaints.create(
                Complaint(
                    room_id=room.id,
                    student_id=request.student_id,
                    category=request.category,
                    description=request.description,
                    status=ComplaintStatus.OPEN,
                )
            )
            return to_schema(complaint, ComplaintResponse)

        result = self._write("create_complaint", op)
        self._log_operation(
            "create_complaint",
            result.id,
            {"room_id": room_id, "category": result.category.value},
        )
        return result

    def update_status(
        self,
        complaint_id: str,
        new_status: Union[ComplaintStatus, str],
    ) -> ComplaintResponse:
        """
        Move a complaint to ``new_status``.

        Setting the current status again is a no-op. Entering RESOLVED
        stamps resolved_at.

        Raises:
            ValidationError: Unknown status value
            NotFoundError: Unknown complaint
            ConflictError: Transition not allowed from the current status
        """
        target = coerce_enum(ComplaintStatus, new_status, "status")

        def op(uow: UnitOfWork) -> ComplaintResponse:
            complaint = uow.complaints.get_by_id(complaint_id)
            current = complaint.status
            if target == current:
                return to_schema(complaint, ComplaintResponse)
            if target not in ALLOWED_TRANSITIONS[current]:
                raise ConflictError(
                    f"Cannot move complaint from {current.value} to {target.value}",
                    details={
                        "complaint_id": complaint_id,
                        "from": current.value,
                        "to": target.value,
                    },
                )

            complaint.status = target
            if target == ComplaintStatus.RESOLVED:
                complaint.resolved_at = utcnow()
            uow.flush()
            return to_schema(complaint, ComplaintResponse)

        result = self._write("update_complaint_status", op)
        self._log_operation(
            "update_complaint_status",
            complaint_id,
            {"status": result.status.value},
        )
        return result

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_complaint(self, complaint_id: str) -> ComplaintResponse:
        return self.store.run_read(
            lambda uow: to_schema(uow.complaints.get_by_id(complaint_id), ComplaintResponse)
        )

    def list_complaints(
        self,
        status: Optional[Union[ComplaintStatus, str]] = None,
        category: Optional[Union[ComplaintCategory, str]] = None,
        room_id: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> List[ComplaintResponse]:
        """Complaints matching every given filter, newest first."""
        filters = self._validate(
            ComplaintFilter,
            {"status": status, "category": category, "room_id": room_id, "student_id": student_id},
        )
        return self.store.run_read(
            lambda uow: to_schema_list(
                uow.complaints.find_filtered(
                    status=filters.status,
                    category=filters.category,
                    room_id=filters.room_id,
                    student_id=filters.student_id,
                ),
                ComplaintResponse,
            )
        )
