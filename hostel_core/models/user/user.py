"""
User model: staff account record consulted by the authentication layer.
"""

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from hostel_core.models.base.base_model import TimestampModel
from hostel_core.models.base.enums import UserRole
from hostel_core.models.base.validators import coerce_enum

__all__ = ["User"]


class User(TimestampModel):
    """Administrative user account."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=UserRole.STAFF,
    )

    @validates("role")
    def validate_role(self, key, value):
        return coerce_enum(UserRole, value, key)

    def to_dict(self, exclude=None):
        return super().to_dict(exclude=(exclude or []) + ["password_hash"])

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
