"""Student models."""

from hostel_core.models.student.student import Student

__all__ = ["Student"]
