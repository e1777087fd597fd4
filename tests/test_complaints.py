"""Tests for complaint creation and the status state machine."""
import pytest

from hostel_core.core.exceptions import ConflictError, NotFoundError, ValidationError
from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus


@pytest.fixture
def complaint(services, room):
    return services.complaints().create_complaint(room.id, "PLUMBING", "Leaking tap in bathroom")


class TestCreateComplaint:
    def test_new_complaint_is_open(self, complaint, room):
        assert complaint.status == ComplaintStatus.OPEN
        assert complaint.category == ComplaintCategory.PLUMBING
        assert complaint.room_id == room.id
        assert complaint.resolved_at is None

    def test_unknown_room(self, services):
        with pytest.raises(NotFoundError):
            services.complaints().create_complaint("missing", ComplaintCategory.OTHER, "Noise")

    def test_unknown_student(self, services, room):
        with pytest.raises(NotFoundError):
            services.complaints().create_complaint(room.id, "OTHER", "Noise", student_id="missing")

    def test_unknown_category(self, services, room):
        with pytest.raises(ValidationError):
            services.complaints().create_complaint(room.id, "PLUMBER", "Leak")

    def test_links_reporting_student(self, services, room, make_student):
        student_id = make_student()
        complaint = services.complaints().create_complaint(room.id, "INTERNET", "Wi-Fi down", student_id)
        assert complaint.student_id == student_id


class TestUpdateStatus:
    def test_open_to_in_progress_to_resolved(self, services, complaint):
        manager = services.complaints()

        in_progress = manager.update_status(complaint.id, ComplaintStatus.IN_PROGRESS)
        assert in_progress.status == ComplaintStatus.IN_PROGRESS
        assert in_progress.resolved_at is None

        resolved = manager.update_status(complaint.id, "RESOLVED")
        assert resolved.status == ComplaintStatus.RESOLVED
        assert resolved.resolved_at is not None

    def test_open_straight_to_resolved(self, services, complaint):
        resolved = services.complaints().update_status(complaint.id, ComplaintStatus.RESOLVED)
        assert resolved.resolved_at is not None

    @pytest.mark.parametrize("target", [ComplaintStatus.OPEN, ComplaintStatus.IN_PROGRESS])
    def test_resolved_is_terminal(self, services, complaint, target):
        manager = services.complaints()
        manager.update_status(complaint.id, ComplaintStatus.RESOLVED)
        resolved = manager.get_complaint(complaint.id)

        with pytest.raises(ConflictError):
            manager.update_status(complaint.id, target)

        current = manager.get_complaint(complaint.id)
        assert current.status == ComplaintStatus.RESOLVED
        assert current.resolved_at == resolved.resolved_at

    def test_in_progress_cannot_reopen(self, services, complaint):
        manager = services.complaints()
        manager.update_status(complaint.id, ComplaintStatus.IN_PROGRESS)
        with pytest.raises(ConflictError):
            manager.update_status(complaint.id, ComplaintStatus.OPEN)

    def test_same_status_is_noop(self, services, complaint):
        manager = services.complaints()
        manager.update_status(complaint.id, ComplaintStatus.RESOLVED)
        first = manager.get_complaint(complaint.id)

        again = manager.update_status(complaint.id, ComplaintStatus.RESOLVED)

        assert again.resolved_at == first.resolved_at
        assert again.updated_at == first.updated_at

    def test_unknown_status_value(self, services, complaint):
        with pytest.raises(ValidationError):
            services.complaints().update_status(complaint.id, "CLOSED")

    def test_unknown_complaint(self, services):
        with pytest.raises(NotFoundError):
            services.complaints().update_status("missing", ComplaintStatus.RESOLVED)


class TestListComplaints:
    def test_filters(self, services, room, hostel):
        manager = services.complaints()
        other_room = services.bed_allocation().create_room_with_beds(hostel.id, "102", 1, "STANDARD", 1)
        leak = manager.create_complaint(room.id, "PLUMBING", "Leak")
        manager.create_complaint(room.id, "ELECTRICAL", "Fan broken")
        manager.create_complaint(other_room.id, "CLEANING", "Dusty floor")
        manager.update_status(leak.id, ComplaintStatus.RESOLVED)

        assert len(manager.list_complaints()) == 3
        assert [c.id for c in manager.list_complaints(status="RESOLVED")] == [leak.id]
        assert len(manager.list_complaints(room_id=room.id)) == 2
        assert len(manager.list_complaints(category=ComplaintCategory.CLEANING)) == 1
        assert manager.list_complaints(status=ComplaintStatus.IN_PROGRESS) == []

    def test_invalid_filter(self, services):
        with pytest.raises(ValidationError):
            services.complaints().list_complaints(status="DONE")
