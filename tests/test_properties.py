"""Tests for property administration."""
import pytest

from hostel_core.core.exceptions import ConflictError, NotFoundError, ValidationError
from hostel_core.models.base.enums import ComplaintCategory, RoomType
from hostel_core.models.complaint import Complaint
from hostel_core.models.room import Bed


class TestCreateProperty:
    def test_creates_empty_property(self, services):
        created = services.properties().create_property("Hillside PG", total_floors=2)

        assert created.name == "Hillside PG"
        assert created.address is None
        snapshot = services.properties().get_property(created.id)
        assert snapshot.rooms == ()

    @pytest.mark.parametrize(
        "name, floors, field",
        [
            ("", 1, "name"),
            ("Hillside PG", 0, "total_floors"),
        ],
    )
    def test_rejects_invalid_input(self, services, name, floors, field):
        with pytest.raises(ValidationError) as exc_info:
            services.properties().create_property(name, total_floors=floors)
        assert field in exc_info.value.field_errors


class TestGetProperty:
    def test_includes_rooms_and_beds(self, services, hostel, room):
        snapshot = services.properties().get_property(hostel.id)

        assert snapshot.name == "Sunrise Hostel"
        assert [r.room_number for r in snapshot.rooms] == ["101"]
        assert len(list(snapshot.iter_beds())) == 2

    def test_unknown_property(self, services):
        with pytest.raises(NotFoundError):
            services.properties().get_property("missing")


class TestDeleteRoom:
    def test_deletes_beds_and_complaints(self, services, store, hostel, room):
        services.complaints().create_complaint(room.id, ComplaintCategory.PLUMBING, "Tap leaking")

        services.properties().delete_room(room.id)

        assert store.read_graph(hostel.id).properties[0].rooms == ()

        def leftovers(uow):
            return (
                uow.session.query(Bed).filter_by(room_id=room.id).count(),
                uow.session.query(Complaint).filter_by(room_id=room.id).count(),
            )

        assert store.run_read(leftovers) == (0, 0)

    def test_occupied_room_cannot_be_deleted(self, services, store, room, make_student):
        student_id = make_student()
        services.bed_allocation().assign_bed(room.beds[0].id, student_id)
        before = store.current_revision()

        with pytest.raises(ConflictError):
            services.properties().delete_room(room.id)

        assert store.read_graph().find_room(room.id) is not None
        assert store.current_revision() == before

    def test_room_number_can_be_reused_after_delete(self, services, hostel, room):
        services.properties().delete_room(room.id)
        again = services.bed_allocation().create_room_with_beds(
            hostel.id, "101", 1, RoomType.NON_AC, 1
        )
        assert again.room_number == "101"

    def test_unknown_room(self, services):
        with pytest.raises(NotFoundError):
            services.properties().delete_room("missing")
