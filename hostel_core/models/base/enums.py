"""
Database enums for the occupancy graph.

Closed value sets for every enumerated field. The same enums are
used by the Pydantic schemas so the store and its callers agree on
the accepted values.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class RoomType(str, enum.Enum):
    """Room type categorization."""
    AC = "AC"
    NON_AC = "NON_AC"
    STANDARD = "STANDARD"


class BedStatus(str, enum.Enum):
    """Bed occupancy status."""
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"


class BookingFrequency(str, enum.Enum):
    """Billing cycle of a booking."""
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    EXCEPTION = "EXCEPTION"


class BookingStatus(str, enum.Enum):
    """Whether a booking is still open."""
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"


class PaymentMethod(str, enum.Enum):
    """Payment method enumeration."""
    UPI_REQUEST = "UPI_REQUEST"
    QR_SCAN = "QR_SCAN"
    CASH_OFFLINE = "CASH_OFFLINE"


class ComplaintStatus(str, enum.Enum):
    """Complaint status workflow."""
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class ComplaintCategory(str, enum.Enum):
    """Complaint category classification."""
    PLUMBING = "PLUMBING"
    ELECTRICAL = "ELECTRICAL"
    CLEANING = "CLEANING"
    FURNITURE = "FURNITURE"
    INTERNET = "INTERNET"
    SECURITY = "SECURITY"
    OTHER = "OTHER"
