# --- File: hostel_core/schemas/complaint/complaint_base.py ---
"""
Complaint input schemas.
"""

from typing import Optional

from pydantic import Field

from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus
from hostel_core.schemas.common.base import BaseCreateSchema, BaseSchema

__all__ = [
    "ComplaintCreate",
    "ComplaintFilter",
]


class ComplaintCreate(BaseCreateSchema):
    """New complaint raised against a room."""

    room_id: str = Field(..., min_length=1)
    category: ComplaintCategory = Field(..., description="Complaint category")
    description: str = Field(..., min_length=1, max_length=2000)
    student_id: Optional[str] = Field(default=None, description="Reporting student")


class ComplaintFilter(BaseSchema):
    """Listing filters; unset fields do not restrict."""

    status: Optional[ComplaintStatus] = None
    category: Optional[ComplaintCategory] = None
    room_id: Optional[str] = None
    student_id: Optional[str] = None
