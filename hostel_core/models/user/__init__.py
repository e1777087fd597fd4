"""User models."""

from hostel_core.models.user.user import User

__all__ = ["User"]
