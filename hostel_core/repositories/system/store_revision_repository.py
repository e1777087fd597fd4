# hostel_core/repositories/system/store_revision_repository.py
"""
Store revision repository.
"""

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from hostel_core.core.exceptions import TransactionError
from hostel_core.models.base.base_model import utcnow
from hostel_core.models.system import STORE_REVISION_ROW_ID, StoreRevision


class StoreRevisionRepository:
    """Reads and advances the single store revision row seeded by ``init_db``."""

    def __init__(self, session: Session):
        self.session = session

    def current(self) -> int:
        stmt = select(StoreRevision.revision).where(StoreRevision.id == STORE_REVISION_ROW_ID)
        return self.session.scalar(stmt) or 0

    def advance(self) -> int:
        """
        Increment the revision and return the new value.

        The UPDATE takes the row's write lock, so concurrent writers queue
        here until the holder commits or rolls back.

        Raises:
            TransactionError: The revision row is missing (``init_db`` never ran)
        """
        result = self.session.execute(
            update(StoreRevision)
            .where(StoreRevision.id == STORE_REVISION_ROW_ID)
            .values(revision=StoreRevision.revision + 1, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise TransactionError("Store revision row is missing; initialize the schema with init_db")
        return self.current()
