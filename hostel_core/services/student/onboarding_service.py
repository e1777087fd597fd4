"""
Resident onboarding: student, booking, payment and bed in one transaction.
"""

from typing import Any, Mapping, Union

from hostel_core.models.booking import Booking
from hostel_core.models.base.enums import BookingStatus
from hostel_core.models.payment import Payment
from hostel_core.models.student import Student
from hostel_core.schemas.booking import BookingResponse
from hostel_core.schemas.payment import PaymentResponse
from hostel_core.schemas.room import BedResponse
from hostel_core.schemas.student import OnboardingRequest, OnboardingResult, StudentResponse
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.entity_store import EntityStore
from hostel_core.services.common.mapping import to_schema
from hostel_core.services.common.unit_of_work import UnitOfWork
from hostel_core.services.room.bed_allocation_service import BedAllocationService


class OnboardingService(BaseService):
    """
    Registers a resident atomically.

    Either the student, their ACTIVE booking, its payment and the bed
    assignment all commit, or nothing does. The bed is claimed with a
    conditional update at the end of the transaction, so a bed taken
    since the caller last looked fails the whole onboarding with a
    ConflictError. There is no retry.
    """

    def __init__(self, store: EntityStore, allocation: BedAllocationService):
        super().__init__(store)
        self.allocation = allocation

    def onboard(self, request: Union[OnboardingRequest, Mapping[str, Any]]) -> OnboardingResult:
        """
        Onboard a resident.

        Args:
            request: Profile, bed, billing plan and payment details

        Returns:
            The created student, booking (with derived monthly rent),
            payment and occupied bed

        Raises:
            ValidationError: Invalid request fields
            NotFoundError: Unknown bed
            ConflictError: Bed no longer AVAILABLE
        """
        request = self._validate(OnboardingRequest, request)

        def op(uow: UnitOfWork) -> OnboardingResult:
            profile = request.profile
            student = uow.students.create(
                Student(
                    name=profile.name,
                    age=profile.age,
                    phone_number=profile.phone_number,
                    email=profile.email,
                    emergency_contact=profile.emergency_contact,
                    address=profile.address,
                    is_active=True,
                )
            )
            booking = uow.bookings.create(
                Booking(
                    student_id=student.id,
                    frequency=request.frequency,
                    start_date=request.start_date,
                    end_date=request.end_date,
                    total_amount=request.total_amount,
                    status=BookingStatus.ACTIVE,
                )
            )
            payment = uow.payments.create(
                Payment(
                    booking_id=booking.id,
                    amount=request.total_amount,
                    method=request.payment_method,
                    transaction_ref=request.transaction_ref,
                )
            )
            bed = self.allocation.assign_in_transaction(uow, request.bed_id, student.id)

            return OnboardingResult(
                student=to_schema(student, StudentResponse),
                booking=to_schema(booking, BookingResponse),
                payment=to_schema(payment, PaymentResponse),
                bed=to_schema(bed, BedResponse),
            )

        result = self._write("onboard", op)
        self._log_operation(
            "onboard",
            result.student.id,
            {
                "bed_id": result.bed.id,
                "booking_id": result.booking.id,
                "frequency": result.booking.frequency.value,
            },
        )
        return result
