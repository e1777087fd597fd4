"""
Store revision counter.

A single row whose ``revision`` is advanced at the start of every write
transaction. Taking that row lock first orders concurrent writers, and
the value doubles as the version stamp of graph snapshots.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from hostel_core.models.base.base_model import Base, utcnow

__all__ = ["StoreRevision", "STORE_REVISION_ROW_ID"]

STORE_REVISION_ROW_ID = 1


class StoreRevision(Base):
    __tablename__ = "store_revisions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=STORE_REVISION_ROW_ID)
    revision: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<StoreRevision(revision={self.revision})>"
