# --- File: hostel_core/schemas/room/bed_response.py ---
"""
Bed response schemas.
"""

from typing import Union

from pydantic import Field, computed_field

from hostel_core.models.base.enums import BedStatus
from hostel_core.schemas.common.base import BaseResponseSchema

__all__ = [
    "BedResponse",
]


class BedResponse(BaseResponseSchema):
    """
    Standard bed response schema.

    Basic bed information returned by allocation operations.
    """

    room_id: str = Field(..., description="Room ID")
    label: str = Field(..., description="Seat label (A, B, ...)")
    label_index: int = Field(..., ge=0, description="Zero-based label position")
    status: BedStatus = Field(..., description="Bed status")
    current_student_id: Union[str, None] = Field(
        default=None,
        description="Current occupant ID",
    )
    version: int = Field(..., description="Optimistic lock version")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_available(self) -> bool:
        """Check if bed is available for assignment."""
        return self.status == BedStatus.AVAILABLE and self.current_student_id is None
