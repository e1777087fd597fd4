"""
Base repository with standardized CRUD operations.

Repositories never commit: they work inside the session owned by the
current UnitOfWork, which decides when the transaction ends.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hostel_core.core.exceptions import NotFoundError
from hostel_core.core.logging import get_logger
from hostel_core.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model class.

    Provides lookup, filtering, counting, creation and deletion
    within the caller's transaction.
    """

    def __init__(self, model: Type[ModelType], session: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Database session
        """
        self.model = model
        self.session = session

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """
        Find entity by ID.

        Args:
            id: Entity ID

        Returns:
            Entity or None
        """
        return self.session.get(self.model, id)

    def get_by_id(self, id: str) -> ModelType:
        """
        Get entity by ID or raise exception.

        Raises:
            NotFoundError: If entity not found
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise NotFoundError(self.model.__name__, id)
        return entity

    def get_for_update(self, id: str) -> ModelType:
        """
        Get entity by ID with a row lock held until the transaction ends.

        Dialects without row locks (SQLite) ignore FOR UPDATE.

        Raises:
            NotFoundError: If entity not found
        """
        entity = self.session.get(self.model, id, with_for_update=True, populate_existing=True)
        if entity is None:
            raise NotFoundError(self.model.__name__, id)
        return entity

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching criteria.

        Args:
            criteria: Filter criteria as key-value pairs; None values are skipped
            order_by: List of fields to order by (prefix with - for desc)

        Returns:
            List of matching entities
        """
        stmt = select(self.model)

        for key, value in criteria.items():
            if value is None:
                continue
            column = getattr(self.model, key)
            if isinstance(value, (list, tuple, set)):
                stmt = stmt.where(column.in_(value))
            else:
                stmt = stmt.where(column == value)

        for field in order_by or []:
            if field.startswith('-'):
                stmt = stmt.order_by(getattr(self.model, field[1:]).desc())
            else:
                stmt = stmt.order_by(getattr(self.model, field))

        return list(self.session.scalars(stmt))

    def find_one_by_criteria(self, criteria: Dict[str, Any]) -> Optional[ModelType]:
        """Find single entity matching criteria."""
        results = self.find_by_criteria(criteria)
        return results[0] if results else None

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching criteria."""
        stmt = select(func.count()).select_from(self.model)
        for key, value in (criteria or {}).items():
            stmt = stmt.where(getattr(self.model, key) == value)
        return self.session.scalar(stmt) or 0

    # ==================== Write Operations ====================

    def create(self, entity: ModelType) -> ModelType:
        """
        Add a new entity and flush so database constraints run now.

        Returns:
            Created entity
        """
        self.session.add(entity)
        self.session.flush()
        logger.debug(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """
        Apply field updates to a loaded entity and flush.

        Unknown fields raise AttributeError rather than being ignored.
        """
        for key, value in data.items():
            if not hasattr(self.model, key):
                raise AttributeError(f"{self.model.__name__} has no field '{key}'")
            setattr(entity, key, value)
        self.session.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        """Delete an entity and flush."""
        self.session.delete(entity)
        self.session.flush()
        logger.debug(f"Deleted {self.model.__name__} with id: {entity.id}")
