"""
Custom Exceptions for the Hostel Occupancy Core

Every failure reported by the core carries a stable ErrorCode so callers
can branch on the kind of failure instead of parsing messages.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Stable failure kinds reported by the core"""
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    CAPACITY_VIOLATION = "CAPACITY_VIOLATION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class BaseAppException(Exception):
    """
    Root of every failure raised by the occupancy core.

    Carries a machine-readable ErrorCode, a details mapping and an
    HTTP-style status for outer layers.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable error payload"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class NotFoundError(BaseAppException):
    """Raised when a referenced entity id does not exist"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.NOT_FOUND, details, 404)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(BaseAppException):
    """Raised when a requested transition is invalid given committed state"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.CONFLICT,
    ):
        super().__init__(message, error_code, details, 409)


class CapacityViolation(ConflictError):
    """Raised when a room capacity would drop below its occupied beds"""

    def __init__(self, room_id: str, requested_capacity: int, occupied_beds: int):
        super().__init__(
            f"Cannot set capacity of room {room_id} to {requested_capacity}: "
            f"{occupied_beds} bed(s) are occupied",
            details={
                "room_id": room_id,
                "requested_capacity": requested_capacity,
                "occupied_beds": occupied_beds,
            },
            error_code=ErrorCode.CAPACITY_VIOLATION,
        )
        self.room_id = room_id
        self.requested_capacity = requested_capacity
        self.occupied_beds = occupied_beds


class ValidationError(BaseAppException):
    """Raised when input data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, 422)
        self.field_errors = field_errors or {}


class TransactionError(BaseAppException):
    """Raised when the store fails for reasons other than contention"""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        details = {"error_type": type(original_error).__name__} if original_error else {}
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)
        self.original_error = original_error


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "NotFoundError",
    "ConflictError",
    "CapacityViolation",
    "ValidationError",
    "TransactionError",
]
