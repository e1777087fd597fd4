# --- File: hostel_core/schemas/complaint/complaint_response.py ---
"""
Complaint response schemas.
"""

from datetime import datetime
from typing import Union

from pydantic import Field

from hostel_core.models.base.enums import ComplaintCategory, ComplaintStatus
from hostel_core.schemas.common.base import BaseResponseSchema

__all__ = [
    "ComplaintResponse",
]


class ComplaintResponse(BaseResponseSchema):
    """Complaint with its lifecycle state."""

    category: ComplaintCategory
    description: str
    status: ComplaintStatus
    room_id: str
    student_id: Union[str, None] = None
    resolved_at: Union[datetime, None] = Field(
        default=None,
        description="Set exactly when the complaint entered RESOLVED",
    )
