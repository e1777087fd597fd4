"""
Declarative base and abstract entity models.

Provides the declarative base and abstract base classes with
the primary key, timestamps and serialization helpers shared
by every entity in the occupancy graph.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# Create declarative base
Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-aware current time used for all timestamps."""
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract entity with a UUID string primary key.

    Every table in the occupancy graph derives from this, directly
    or through TimestampModel.
    """

    __abstract__ = True

    # Assigned on insert when the caller leaves it empty
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="Entity id"
    )

    def to_dict(self, exclude: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Column values as JSON-friendly primitives.

        Args:
            exclude: Column names to leave out

        Returns:
            Mapping of column name to value
        """
        exclude = exclude or []
        result = {}

        for column in self.__table__.columns:
            if column.key in exclude:
                continue
            value = getattr(self, column.key)

            # Handle special types
            if isinstance(value, (datetime, date)):
                result[column.key] = value.isoformat()
            elif isinstance(value, Enum):
                result[column.key] = value.value
            elif isinstance(value, Decimal):
                result[column.key] = str(value)
            else:
                result[column.key] = value

        return result

    def __repr__(self) -> str:
        """Class name and id."""
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


class TimestampModel(BaseModel):
    """Entity with created_at and updated_at maintained on write."""

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="Insert time (UTC)"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="Last write time (UTC)"
    )
