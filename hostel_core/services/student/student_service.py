"""
Resident queries and lifecycle.
"""

from typing import Any, List, Optional

from hostel_core.models.base.base_model import utcnow
from hostel_core.models.base.enums import BookingStatus
from hostel_core.models.booking import Booking
from hostel_core.models.student import Student
from hostel_core.schemas.booking import BookingResponse
from hostel_core.schemas.payment import PaymentResponse
from hostel_core.schemas.room import BedResponse
from hostel_core.schemas.student import ResidentView, StudentResponse, StudentUpdate
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.mapping import to_optional_schema, to_schema
from hostel_core.services.common.unit_of_work import UnitOfWork


def _active_booking(student: Student) -> Optional[Booking]:
    return next((booking for booking in student.bookings if booking.is_open), None)


def build_resident_view(student: Student) -> ResidentView:
    """Resident view of a loaded student; must run inside the session."""
    bed = student.bed
    room = bed.room if bed is not None else None
    booking = _active_booking(student)
    payment = booking.payment if booking is not None else None

    return ResidentView(
        student=to_schema(student, StudentResponse),
        bed=to_optional_schema(bed, BedResponse),
        room_id=room.id if room is not None else None,
        room_number=room.room_number if room is not None else None,
        floor_number=room.floor_number if room is not None else None,
        property_id=room.property_id if room is not None else None,
        booking=to_optional_schema(booking, BookingResponse),
        payment=to_optional_schema(payment, PaymentResponse),
        monthly_rent=booking.monthly_rent if booking is not None else None,
        payment_status="PAID" if payment is not None else "PENDING",
        last_payment_at=payment.paid_at if payment is not None else None,
    )


def _check_out(uow: UnitOfWork, student: Student) -> None:
    """Release the bed, terminate ACTIVE bookings and mark inactive; no-op if already inactive."""
    if not student.is_active:
        return

    bed = uow.beds.find_by_student(student.id)
    if bed is not None:
        uow.beds.release(bed)

    terminated_at = utcnow()
    for booking in uow.bookings.find_active_by_student(student.id):
        booking.status = BookingStatus.TERMINATED
        booking.terminated_at = terminated_at

    student.is_active = False
    uow.flush()


class StudentService(BaseService):
    """Resident lookups, profile edits and deactivation."""

    def get_resident(self, student_id: str) -> ResidentView:
        """
        Student with their bed, room, active booking and payment state.

        Raises:
            NotFoundError: Unknown student
        """
        return self.store.run_read(
            lambda uow: build_resident_view(uow.students.get_by_id(student_id))
        )

    def list_residents(self, active_only: bool = True) -> List[ResidentView]:
        return self.store.run_read(
            lambda uow: [build_resident_view(s) for s in uow.students.find_residents(active_only)]
        )

    def update_student(self, student_id: str, **fields: Any) -> StudentResponse:
        """
        Edit a student's profile or active flag.

        Only the fields passed are changed. ``is_active=False`` checks the
        resident out exactly like :meth:`deactivate_student`;
        ``is_active=True`` only flips the flag and leaves beds and bookings
        as they are.

        Raises:
            ValidationError: Invalid value, cleared required field or unknown field
            NotFoundError: Unknown student
        """
        update = self._validate(StudentUpdate, fields)
        changes = update.model_dump(exclude_unset=True)
        deactivate = changes.get("is_active") is False
        if deactivate:
            del changes["is_active"]

        def op(uow: UnitOfWork) -> StudentResponse:
            student = uow.students.get_by_id(student_id)
            if changes:
                uow.students.update(student, changes)
            if deactivate:
                _check_out(uow, student)
            return to_schema(student, StudentResponse)

        result = self._write("update_student", op)
        fields_changed = sorted(changes) + (["is_active"] if deactivate else [])
        self._log_operation("update_student", student_id, {"fields": fields_changed})
        return result

    def deactivate_student(self, student_id: str) -> StudentResponse:
        """
        Check a resident out.

        Releases their bed, terminates every ACTIVE booking and marks the
        student inactive, all in one transaction. Deactivating an inactive
        student changes nothing.

        Raises:
            NotFoundError: Unknown student
        """

        def op(uow: UnitOfWork) -> StudentResponse:
            student = uow.students.get_by_id(student_id)
            _check_out(uow, student)
            return to_schema(student, StudentResponse)

        result = self._write("deactivate_student", op)
        self._log_operation("deactivate_student", student_id)
        return result
