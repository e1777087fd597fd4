# --- File: hostel_core/schemas/student/student_base.py ---
"""
Student profile schemas.

StudentProfile is the full profile captured at onboarding; StudentUpdate
is a partial edit of the same fields with the same normalization.
"""

from typing import Any, Optional

from pydantic import EmailStr, Field, field_validator

from hostel_core.schemas.common.base import BaseCreateSchema, BaseUpdateSchema

__all__ = [
    "StudentProfile",
    "StudentUpdate",
]


def _normalize_name(v: str) -> str:
    v = " ".join(v.split())
    if not v:
        raise ValueError("Name cannot be blank")
    if v.isdigit():
        raise ValueError("Name cannot be only numbers")
    return v


def _normalize_phone(v: str) -> str:
    """Drop spaces and dashes; what remains must be digits with an optional leading '+'."""
    v = v.replace(" ", "").replace("-", "")
    digits = v[1:] if v.startswith("+") else v
    if not digits or not digits.isdigit():
        raise ValueError("Phone number must contain digits only")
    return v


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class StudentProfile(BaseCreateSchema):
    """Personal details captured when a resident is registered."""

    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    age: int = Field(..., gt=0, lt=150, description="Age in years")
    phone_number: str = Field(..., min_length=1, max_length=20, description="Contact number")
    email: Optional[EmailStr] = Field(default=None, description="Contact email")
    emergency_contact: str = Field(..., min_length=1, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Collapse internal whitespace and reject purely numeric names."""
        return _normalize_name(v)

    @field_validator("phone_number", "emergency_contact")
    @classmethod
    def normalize_phone(cls, v: str) -> str:
        return _normalize_phone(v)

    @field_validator("email", "address", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        """Normalize email to lowercase."""
        return v.lower() if v is not None else None


class StudentUpdate(BaseUpdateSchema):
    """
    Partial edit of a student.

    Only fields actually passed are applied. ``email`` and ``address``
    may be cleared with None; the required contact fields may not.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    age: Optional[int] = Field(default=None, gt=0, lt=150)
    phone_number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    email: Optional[EmailStr] = Field(default=None, description="Contact email")
    emergency_contact: Optional[str] = Field(default=None, min_length=1, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    is_active: Optional[bool] = None

    @field_validator("name", "age", "phone_number", "emergency_contact", "is_active", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be cleared")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _normalize_name(v)

    @field_validator("phone_number", "emergency_contact")
    @classmethod
    def normalize_phone(cls, v: str) -> str:
        return _normalize_phone(v)

    @field_validator("email", "address", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v is not None else None
