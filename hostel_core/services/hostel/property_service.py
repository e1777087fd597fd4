"""
Property administration: creating properties and removing rooms.
"""

from typing import Optional

from hostel_core.core.exceptions import ConflictError
from hostel_core.models.base.enums import BedStatus
from hostel_core.models.hostel import Property
from hostel_core.schemas.hostel import PropertyCreate, PropertyResponse, PropertySnapshot
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.mapping import to_schema
from hostel_core.services.common.unit_of_work import UnitOfWork


class PropertyService(BaseService):
    """Properties and their room set."""

    def create_property(
        self,
        name: str,
        address: Optional[str] = None,
        total_floors: int = 1,
    ) -> PropertyResponse:
        """
        Register a property with no rooms.

        Raises:
            ValidationError: Empty name or fewer than one floor
        """
        request = self._validate(
            PropertyCreate,
            {"name": name, "address": address, "total_floors": total_floors},
        )

        def op(uow: UnitOfWork) -> PropertyResponse:
            hostel_property = uow.properties.create(
                Property(
                    name=request.name,
                    address=request.address,
                    total_floors=request.total_floors,
                )
            )
            return to_schema(hostel_property, PropertyResponse)

        result = self._write("create_property", op)
        self._log_operation("create_property", result.id, {"name": result.name})
        return result

    def get_property(self, property_id: str) -> PropertySnapshot:
        """
        Property with its rooms and beds at the current revision.

        Raises:
            NotFoundError: Unknown property
        """
        return self.store.read_graph(property_id).properties[0]

    def delete_room(self, room_id: str) -> None:
        """
        Delete a room together with its beds and complaints.

        Raises:
            NotFoundError: Unknown room
            ConflictError: Some bed in the room is occupied
        """

        def op(uow: UnitOfWork) -> None:
            room = uow.rooms.get_for_update(room_id)
            occupied = [bed.id for bed in room.beds if bed.status == BedStatus.OCCUPIED]
            if occupied:
                raise ConflictError(
                    "Rooms with occupied beds cannot be deleted",
                    details={"room_id": room_id, "occupied_bed_ids": occupied},
                )
            uow.rooms.delete(room)

        self._write("delete_room", op)
        self._log_operation("delete_room", room_id)
