# hostel_core/repositories/payment/payment_repository.py
"""
Payment repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_core.models.payment import Payment
from hostel_core.repositories.base.base_repository import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    """Repository for Payment entity."""

    def __init__(self, session: Session):
        super().__init__(Payment, session)

    def find_by_booking(self, booking_id: str) -> Optional[Payment]:
        return self.find_one_by_criteria({"booking_id": booking_id})
