"""Tests for bed assignment, release, room creation and capacity changes."""
import pytest

from hostel_core.core.exceptions import (
    CapacityViolation,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from hostel_core.models.base.enums import BedStatus, RoomType
from hostel_core.models.student import Student
from tests.helpers import assert_bed_invariant


class TestCreateRoomWithBeds:
    def test_creates_room_and_labelled_beds(self, services, hostel):
        """A new room gets exactly bed_count AVAILABLE beds labelled from A."""
        room = services.bed_allocation().create_room_with_beds(hostel.id, "202", 2, "NON_AC", 3)

        assert room.capacity == 3
        assert room.room_type == RoomType.NON_AC
        assert [bed.label for bed in room.beds] == ["A", "B", "C"]
        assert all(bed.status == BedStatus.AVAILABLE for bed in room.beds)
        assert room.occupied_beds == 0

    def test_rejects_non_positive_bed_count(self, services, hostel):
        with pytest.raises(ValidationError) as exc_info:
            services.bed_allocation().create_room_with_beds(hostel.id, "203", 2, RoomType.AC, 0)
        assert "bed_count" in exc_info.value.field_errors

    def test_rejects_unknown_room_type(self, services, hostel):
        with pytest.raises(ValidationError):
            services.bed_allocation().create_room_with_beds(hostel.id, "204", 2, "DELUXE", 2)

    def test_unknown_property(self, services):
        with pytest.raises(NotFoundError):
            services.bed_allocation().create_room_with_beds("missing", "101", 1, RoomType.AC, 2)

    def test_duplicate_room_number_conflicts_and_creates_nothing(self, services, hostel, room, store):
        """The second room with the same number fails and leaves no beds behind."""
        with pytest.raises(ConflictError):
            services.bed_allocation().create_room_with_beds(hostel.id, "101", 1, RoomType.AC, 4)

        snapshot = store.read_graph()
        assert len(list(snapshot.iter_rooms())) == 1
        assert len(list(snapshot.iter_beds())) == 2


class TestAssignBed:
    def test_assigns_available_bed(self, services, room, make_student):
        student_id = make_student()
        bed = services.bed_allocation().assign_bed(room.beds[0].id, student_id)

        assert bed.status == BedStatus.OCCUPIED
        assert bed.current_student_id == student_id
        assert bed.is_available is False

    def test_occupied_bed_conflicts_and_is_unchanged(self, services, room, make_student, store):
        allocation = services.bed_allocation()
        first = make_student("First")
        second = make_student("Second")
        bed_id = room.beds[0].id
        allocation.assign_bed(bed_id, first)

        with pytest.raises(ConflictError) as exc_info:
            allocation.assign_bed(bed_id, second)

        assert exc_info.value.error_code == ErrorCode.CONFLICT
        bed = store.read_graph().find_bed(bed_id)
        assert bed.current_student_id == first
        assert bed.status == BedStatus.OCCUPIED

    def test_student_cannot_hold_two_beds(self, services, room, make_student):
        allocation = services.bed_allocation()
        student_id = make_student()
        allocation.assign_bed(room.beds[0].id, student_id)

        with pytest.raises(ConflictError):
            allocation.assign_bed(room.beds[1].id, student_id)

    def test_unknown_bed_and_student(self, services, room, make_student):
        allocation = services.bed_allocation()
        with pytest.raises(NotFoundError):
            allocation.assign_bed("no-such-bed", make_student())
        with pytest.raises(NotFoundError):
            allocation.assign_bed(room.beds[0].id, "no-such-student")

    def test_student_without_active_booking_conflicts(self, services, room, store):
        """Occupied beds must always be backed by an open booking."""
        student_id = store.run_transaction(
            lambda uow: uow.students.create(
                Student(name="No Booking", age=30, phone_number="9000000001", emergency_contact="9000000002")
            ).id
        )

        with pytest.raises(ConflictError):
            services.bed_allocation().assign_bed(room.beds[0].id, student_id)
        assert store.read_graph().find_bed(room.beds[0].id).status == BedStatus.AVAILABLE

    def test_inactive_student_conflicts(self, services, room, make_student):
        student_id = make_student()
        services.students().deactivate_student(student_id)

        with pytest.raises(ConflictError):
            services.bed_allocation().assign_bed(room.beds[0].id, student_id)


class TestReleaseBed:
    def test_release_frees_bed(self, services, room, make_student, store):
        allocation = services.bed_allocation()
        bed_id = room.beds[0].id
        allocation.assign_bed(bed_id, make_student())

        bed = allocation.release_bed(bed_id)

        assert bed.status == BedStatus.AVAILABLE
        assert bed.current_student_id is None
        assert_bed_invariant(store)

    def test_release_available_bed_is_noop(self, services, room):
        bed = services.bed_allocation().release_bed(room.beds[1].id)
        assert bed.status == BedStatus.AVAILABLE
        assert bed.version == room.beds[1].version

    def test_released_bed_can_be_reassigned(self, services, room, make_student):
        allocation = services.bed_allocation()
        bed_id = room.beds[0].id
        allocation.assign_bed(bed_id, make_student("One"))
        allocation.release_bed(bed_id)

        other = make_student("Two")
        assert allocation.assign_bed(bed_id, other).current_student_id == other


class TestResizeRoomCapacity:
    def test_grow_creates_beds_continuing_labels(self, services, room):
        """Capacity 2 with A, B resized to 4 gives A, B, C, D; A and B unchanged."""
        result = services.bed_allocation().resize_room_capacity(room.id, 4)

        assert result.room.capacity == 4
        assert [bed.label for bed in result.room.beds] == ["A", "B", "C", "D"]
        assert [bed.label for bed in result.created_beds] == ["C", "D"]
        assert [bed.id for bed in result.room.beds[:2]] == [bed.id for bed in room.beds]
        assert all(bed.status == BedStatus.AVAILABLE for bed in result.created_beds)

    def test_shrink_keeps_beds(self, services, room):
        result = services.bed_allocation().resize_room_capacity(room.id, 1)

        assert result.room.capacity == 1
        assert len(result.room.beds) == 2
        assert result.created_beds == []

    def test_below_occupied_is_capacity_violation(self, services, room, make_student, store):
        allocation = services.bed_allocation()
        allocation.assign_bed(room.beds[0].id, make_student("One"))
        allocation.assign_bed(room.beds[1].id, make_student("Two"))

        with pytest.raises(CapacityViolation) as exc_info:
            allocation.resize_room_capacity(room.id, 1)

        assert exc_info.value.error_code == ErrorCode.CAPACITY_VIOLATION
        assert exc_info.value.occupied_beds == 2
        assert store.read_graph().find_room(room.id).capacity == 2

    def test_equal_to_occupied_is_allowed(self, services, room, make_student):
        allocation = services.bed_allocation()
        allocation.assign_bed(room.beds[0].id, make_student())
        assert allocation.resize_room_capacity(room.id, 1).room.capacity == 1

    def test_negative_capacity_rejected(self, services, room):
        with pytest.raises(ValidationError):
            services.bed_allocation().resize_room_capacity(room.id, -1)

    def test_labels_continue_after_highest_existing(self, services, room):
        """Removing a bed never causes a label to be reused."""
        allocation = services.bed_allocation()
        allocation.resize_room_capacity(room.id, 3)  # A, B, C
        allocation.remove_bed(room.beds[1].id)  # drop B

        result = allocation.resize_room_capacity(room.id, 3)

        assert [bed.label for bed in result.created_beds] == ["D"]
        assert [bed.label for bed in result.room.beds] == ["A", "C", "D"]

    def test_unknown_room(self, services):
        with pytest.raises(NotFoundError):
            services.bed_allocation().resize_room_capacity("missing", 3)


class TestRemoveBed:
    def test_removes_available_bed(self, services, room, store):
        services.bed_allocation().remove_bed(room.beds[1].id)
        assert store.read_graph().find_bed(room.beds[1].id) is None

    def test_occupied_bed_cannot_be_removed(self, services, room, make_student, store):
        allocation = services.bed_allocation()
        allocation.assign_bed(room.beds[0].id, make_student())

        with pytest.raises(ConflictError):
            allocation.remove_bed(room.beds[0].id)
        assert store.read_graph().find_bed(room.beds[0].id) is not None
