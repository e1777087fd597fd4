"""
Shared pytest fixtures.

Each test gets its own SQLite database file, so separate sessions (and
threads) really do compete for the same rows.
"""
from datetime import date
from decimal import Decimal

import pytest

from hostel_core.config.database import create_db_engine, create_session_factory
from hostel_core.config.settings import Settings
from hostel_core.db.init_db import init_db
from hostel_core.models.base.enums import BookingFrequency, BookingStatus, RoomType
from hostel_core.models.booking import Booking
from hostel_core.models.student import Student
from hostel_core.services.base.service_factory import ServiceFactory
from hostel_core.services.common.entity_store import EntityStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'hostel.db'}",
        ENVIRONMENT="testing",
        LOG_LEVEL="DEBUG",
        DB_LOCK_TIMEOUT_SECONDS=2.0,
    )


@pytest.fixture
def engine(settings: Settings):
    engine = create_db_engine(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine, settings: Settings) -> EntityStore:
    return EntityStore(create_session_factory(engine), settings)


@pytest.fixture
def services(store: EntityStore) -> ServiceFactory:
    return ServiceFactory(store)


@pytest.fixture
def hostel(services: ServiceFactory):
    """A property with no rooms yet."""
    return services.properties().create_property("Sunrise Hostel", "12 Lake Road", 3)


@pytest.fixture
def room(services: ServiceFactory, hostel):
    """Room 101 with capacity 2 and beds A, B."""
    return services.bed_allocation().create_room_with_beds(hostel.id, "101", 1, RoomType.AC, 2)


@pytest.fixture
def make_student(store: EntityStore):
    """Factory creating an active student with one ACTIVE booking and no bed."""

    def _make(name: str = "Ravi Kumar") -> str:
        def op(uow):
            student = uow.students.create(
                Student(name=name, age=22, phone_number="9000000000", emergency_contact="9111111111")
            )
            uow.bookings.create(
                Booking(
                    student_id=student.id,
                    frequency=BookingFrequency.MONTHLY,
                    start_date=date(2024, 1, 1),
                    end_date=date(2024, 6, 30),
                    total_amount=Decimal("5000"),
                    status=BookingStatus.ACTIVE,
                )
            )
            return student.id

        return store.run_transaction(op)

    return _make
