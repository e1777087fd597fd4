# --- File: hostel_core/schemas/hostel/hostel_base.py ---
"""
Property input and response schemas.
"""

from typing import Optional, Union

from pydantic import Field

from hostel_core.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = [
    "PropertyCreate",
    "PropertyResponse",
]


class PropertyCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, max_length=500)
    total_floors: int = Field(default=1, ge=1)


class PropertyResponse(BaseResponseSchema):
    name: str
    address: Union[str, None] = None
    total_floors: int
