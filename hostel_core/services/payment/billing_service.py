"""
Billing: booking lookups, derived rent and payment corrections.
"""

from decimal import Decimal
from typing import Any

from hostel_core.schemas.booking import BookingResponse
from hostel_core.schemas.payment import PaymentResponse, PaymentUpdate
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.mapping import to_schema
from hostel_core.services.common.unit_of_work import UnitOfWork


class BillingService(BaseService):
    """Read access to bookings and edits to recorded payments."""

    def get_booking(self, booking_id: str) -> BookingResponse:
        return self.store.run_read(
            lambda uow: to_schema(uow.bookings.get_by_id(booking_id), BookingResponse)
        )

    def monthly_rent(self, booking_id: str) -> Decimal:
        """
        Effective monthly rent of a booking.

        YEARLY totals are divided by twelve, MONTHLY totals are returned
        as is and EXCEPTION totals are spread over the months the booking
        spans.

        Raises:
            NotFoundError: Unknown booking
        """
        return self.store.run_read(lambda uow: uow.bookings.get_by_id(booking_id).monthly_rent)

    def update_payment(self, payment_id: str, **fields: Any) -> PaymentResponse:
        """
        Correct a payment's method and/or transaction reference.

        Only the fields passed are changed; ``transaction_ref=None`` clears
        the reference.

        Raises:
            ValidationError: Unknown payment method, null method or unknown field
            NotFoundError: Unknown payment
        """
        update = self._validate(PaymentUpdate, fields)
        changes = update.model_dump(exclude_unset=True)

        def op(uow: UnitOfWork) -> PaymentResponse:
            payment = uow.payments.get_by_id(payment_id)
            if changes:
                uow.payments.update(payment, changes)
            return to_schema(payment, PaymentResponse)

        result = self._write("update_payment", op)
        self._log_operation("update_payment", payment_id, {"fields": sorted(changes)})
        return result
