"""Tests for model-level validation and serialization."""
from datetime import date
from decimal import Decimal

import pytest

from hostel_core.core.exceptions import ConflictError, ValidationError
from hostel_core.models import Booking, User
from hostel_core.models.base.enums import BedStatus, BookingFrequency, UserRole
from hostel_core.models.room import Bed
from hostel_core.schemas.room import BedResponse
from hostel_core.services.common.mapping import to_schema


def test_enum_fields_accept_raw_values():
    booking = Booking(frequency="YEARLY")
    assert booking.frequency is BookingFrequency.YEARLY


def test_unknown_enum_value_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Bed(status="BROKEN")
    assert "status" in exc_info.value.field_errors


def test_booking_monthly_rent():
    booking = Booking(
        frequency=BookingFrequency.YEARLY,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        total_amount=Decimal("36000"),
    )
    assert booking.monthly_rent == Decimal("3000.00")


class TestUser:
    def test_to_dict_hides_password_hash(self):
        user = User(username="warden", password_hash="x" * 60, name="Head Warden", role="ADMIN")
        data = user.to_dict()
        assert "password_hash" not in data
        assert data["role"] == "ADMIN"
        assert user.role is UserRole.ADMIN

    def test_username_is_unique(self, store):
        def add(uow):
            uow.session.add(User(username="warden", password_hash="h", name="A"))
            uow.flush()

        store.run_transaction(add)
        with pytest.raises(ConflictError):
            store.run_transaction(add)


def test_bed_defaults_to_available(store, room):
    bed = store.run_read(
        lambda uow: to_schema(uow.beds.get_by_id(room.beds[0].id), BedResponse)
    )
    assert bed.status == BedStatus.AVAILABLE
    assert bed.current_student_id is None
