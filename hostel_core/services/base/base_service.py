"""
Base service class providing common functionality for all services.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hostel_core.core.exceptions import ValidationError
from hostel_core.core.logging import get_logger
from hostel_core.services.common.entity_store import EntityStore
from hostel_core.services.common.unit_of_work import UnitOfWork

TSchema = TypeVar("TSchema", bound=BaseModel)
T = TypeVar("T")


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and entity store
    - Request validation with pydantic, reported as ValidationError
    - Standardized operation logging
    """

    def __init__(self, store: EntityStore):
        """
        Initialize base service.

        Args:
            store: Entity store every operation runs against
        """
        self.store = store
        self._logger = get_logger(self.__class__.__name__)

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def _write(self, operation: str, fn: Callable[[UnitOfWork], T]) -> T:
        """
        Run ``fn`` as one write transaction, logging conflicts.

        Exceptions propagate unchanged after the rollback.
        """
        try:
            return self.store.run_transaction(fn)
        except Exception as e:
            self._logger.warning(
                f"Operation failed: {operation}: {e}",
                extra={"operation": operation, "exception_type": type(e).__name__},
            )
            raise

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @staticmethod
    def _validate(schema_cls: Type[TSchema], data: Any) -> TSchema:
        """
        Validate ``data`` against ``schema_cls``.

        Raises:
            ValidationError: With per-field messages if validation fails
        """
        if isinstance(data, schema_cls):
            return data
        try:
            if isinstance(data, BaseModel):
                data = data.model_dump()
            return schema_cls.model_validate(data)
        except PydanticValidationError as exc:
            field_errors: Dict[str, list] = {}
            for error in exc.errors():
                field = ".".join(str(part) for part in error["loc"]) or "__root__"
                field_errors.setdefault(field, []).append(error["msg"])
            raise ValidationError(
                f"Invalid {schema_cls.__name__}",
                field_errors=field_errors,
            ) from exc

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log service operation with standardized format.

        Args:
            operation: Description of the operation
            entity_ref: Reference to the entity involved
            extra: Additional context to log
        """
        context = {"entity_ref": str(entity_ref) if entity_ref else None}
        if extra:
            context.update(extra)

        self._logger.info(f"Operation: {operation}", extra=context)
