"""
Bed allocation service: assigning and releasing beds, and shaping rooms.

Every public operation is one store transaction. Claims go through a
conditional UPDATE, so a bed taken by a concurrent writer is reported
as a conflict instead of being overwritten.
"""

from typing import List, Union

from hostel_core.core.exceptions import CapacityViolation, ConflictError
from hostel_core.models.base.enums import BedStatus, RoomType
from hostel_core.models.room import Bed, Room
from hostel_core.schemas.room import (
    BedResponse,
    CapacityUpdate,
    RoomCreate,
    RoomResizeResult,
    RoomResponse,
)
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.mapping import to_schema, to_schema_list
from hostel_core.services.common.unit_of_work import UnitOfWork
from hostel_core.utils.bed_labels import label_for_index, next_label_indexes


class BedAllocationService(BaseService):
    """
    High-level bed allocation operations.

    Keeps bed occupancy, room capacity and resident bookings consistent:
    an OCCUPIED bed always has exactly one occupant holding exactly one
    ACTIVE booking, and capacity never drops below occupied beds.
    """

    # -------------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------------

    def assign_bed(self, bed_id: str, student_id: str) -> BedResponse:
        """
        Assign an AVAILABLE bed to a student.

        Args:
            bed_id: Bed to occupy
            student_id: Active student with one ACTIVE booking and no bed

        Returns:
            The occupied bed

        Raises:
            NotFoundError: Unknown bed or student
            ConflictError: Bed not AVAILABLE, or student cannot take a bed
        """

        def op(uow: UnitOfWork) -> BedResponse:
            bed = self.assign_in_transaction(uow, bed_id, student_id)
            return to_schema(bed, BedResponse)

        result = self._write("assign_bed", op)
        self._log_operation("assign_bed", bed_id, {"student_id": student_id})
        return result

    def assign_in_transaction(self, uow: UnitOfWork, bed_id: str, student_id: str) -> Bed:
        """Assignment rules applied inside a caller's transaction."""
        bed = uow.beds.get_by_id(bed_id)
        if bed.status != BedStatus.AVAILABLE:
            raise ConflictError(
                f"Bed {bed.label} is not available",
                details={"bed_id": bed_id, "status": bed.status.value},
            )

        student = uow.students.get_by_id(student_id)
        if not student.is_active:
            raise ConflictError(
                "Inactive students cannot be assigned a bed",
                details={"student_id": student_id},
            )

        held = uow.beds.find_by_student(student_id)
        if held is not None:
            raise ConflictError(
                "Student already occupies another bed",
                details={"student_id": student_id, "bed_id": held.id},
            )

        active_bookings = uow.bookings.find_active_by_student(student_id)
        if len(active_bookings) != 1:
            raise ConflictError(
                "Student must have exactly one active booking to occupy a bed",
                details={"student_id": student_id, "active_bookings": len(active_bookings)},
            )

        if not uow.beds.claim(bed, student_id):
            raise ConflictError(
                "Bed was taken by a concurrent transaction",
                details={"bed_id": bed_id},
            )
        return bed

    def release_bed(self, bed_id: str) -> BedResponse:
        """
        Free an OCCUPIED bed. Releasing an AVAILABLE bed changes nothing.

        Raises:
            NotFoundError: Unknown bed
        """

        def op(uow: UnitOfWork) -> BedResponse:
            bed = uow.beds.get_by_id(bed_id)
            if bed.status == BedStatus.OCCUPIED:
                uow.beds.release(bed)
            return to_schema(bed, BedResponse)

        result = self._write("release_bed", op)
        self._log_operation("release_bed", bed_id)
        return result

    # -------------------------------------------------------------------------
    # Room shape
    # -------------------------------------------------------------------------

    def resize_room_capacity(self, room_id: str, new_capacity: int) -> RoomResizeResult:
        """
        Change a room's capacity.

        Growing past the current bed count creates AVAILABLE beds whose
        labels continue after the highest existing label. Shrinking never
        deletes beds.

        Raises:
            ValidationError: Negative capacity
            NotFoundError: Unknown room
            CapacityViolation: New capacity below the occupied bed count
        """
        request = self._validate(CapacityUpdate, {"room_id": room_id, "new_capacity": new_capacity})

        def op(uow: UnitOfWork) -> RoomResizeResult:
            room = uow.rooms.get_for_update(request.room_id)
            occupied = uow.beds.count_occupied_in_room(room.id)
            if request.new_capacity < occupied:
                raise CapacityViolation(room.id, request.new_capacity, occupied)

            room.capacity = request.new_capacity
            created: List[Bed] = []
            missing = request.new_capacity - len(room.beds)
            if missing > 0:
                existing = [bed.label_index for bed in room.beds]
                for index in next_label_indexes(existing, missing):
                    bed = Bed(label=label_for_index(index), label_index=index, status=BedStatus.AVAILABLE)
                    room.beds.append(bed)
                    created.append(bed)
            uow.flush()

            return RoomResizeResult(
                room=to_schema(room, RoomResponse),
                created_beds=to_schema_list(created, BedResponse),
            )

        result = self._write("resize_room_capacity", op)
        self._log_operation(
            "resize_room_capacity",
            room_id,
            {"new_capacity": new_capacity, "created_beds": len(result.created_beds)},
        )
        return result

    def create_room_with_beds(
        self,
        property_id: str,
        room_number: str,
        floor_number: int,
        room_type: Union[RoomType, str],
        bed_count: int,
    ) -> RoomResponse:
        """
        Create a room and ``bed_count`` AVAILABLE beds labelled A, B, ...

        The room and its beds are committed together or not at all.

        Raises:
            ValidationError: ``bed_count <= 0`` or unknown room type
            NotFoundError: Unknown property
            ConflictError: Room number already used in the property
        """
        request = self._validate(
            RoomCreate,
            {
                "property_id": property_id,
                "room_number": room_number,
                "floor_number": floor_number,
                "room_type": room_type,
                "bed_count": bed_count,
            },
        )

        def op(uow: UnitOfWork) -> RoomResponse:
            hostel_property = uow.properties.get_by_id(request.property_id)
            if uow.rooms.find_by_number(hostel_property.id, request.room_number) is not None:
                raise ConflictError(
                    f"Room {request.room_number} already exists in this property",
                    details={"property_id": hostel_property.id, "room_number": request.room_number},
                )

            room = Room(
                property_id=hostel_property.id,
                room_number=request.room_number,
                floor_number=request.floor_number,
                room_type=request.room_type,
                capacity=request.bed_count,
                beds=[
                    Bed(label=label_for_index(i), label_index=i, status=BedStatus.AVAILABLE)
                    for i in range(request.bed_count)
                ],
            )
            uow.rooms.create(room)
            return to_schema(room, RoomResponse)

        result = self._write("create_room_with_beds", op)
        self._log_operation(
            "create_room_with_beds",
            result.id,
            {"property_id": property_id, "bed_count": bed_count},
        )
        return result

    def remove_bed(self, bed_id: str) -> None:
        """
        Delete an AVAILABLE bed. Room capacity is left as it is.

        Raises:
            NotFoundError: Unknown bed
            ConflictError: Bed is occupied
        """

        def op(uow: UnitOfWork) -> None:
            bed = uow.beds.get_by_id(bed_id)
            if bed.status == BedStatus.OCCUPIED:
                raise ConflictError(
                    "Occupied beds cannot be removed",
                    details={"bed_id": bed_id, "student_id": bed.current_student_id},
                )
            uow.beds.delete(bed)

        self._write("remove_bed", op)
        self._log_operation("remove_bed", bed_id)
