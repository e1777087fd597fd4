"""Test helpers shared across modules."""
from datetime import date
from decimal import Decimal

from hostel_core.models.base.enums import BedStatus, BookingFrequency
from hostel_core.services.common.entity_store import EntityStore


def onboarding_payload(bed_id: str, **overrides) -> dict:
    """Valid onboarding request for ``bed_id``; keyword overrides replace top-level fields."""
    payload = {
        "profile": {
            "name": "Asha Verma",
            "age": 21,
            "phone_number": "98765 43210",
            "email": "Asha@Example.com",
            "emergency_contact": "91234-56789",
            "address": "4 Hill Street",
        },
        "bed_id": bed_id,
        "frequency": BookingFrequency.YEARLY,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "total_amount": Decimal("60000"),
        "payment_method": "UPI_REQUEST",
        "transaction_ref": "UPI-0001",
    }
    payload.update(overrides)
    return payload


def assert_bed_invariant(store: EntityStore) -> None:
    """Every bed is OCCUPIED exactly when it has a current student."""
    snapshot = store.read_graph()
    for bed in snapshot.iter_beds():
        assert (bed.status == BedStatus.OCCUPIED) == (bed.current_student_id is not None), bed
