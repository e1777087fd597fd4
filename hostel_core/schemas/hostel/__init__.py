# --- File: hostel_core/schemas/hostel/__init__.py ---
"""
Hostel property and occupancy graph schemas.
"""

from hostel_core.schemas.hostel.hostel_base import PropertyCreate, PropertyResponse
from hostel_core.schemas.hostel.snapshot import (
    BedSnapshot,
    GraphSnapshot,
    PropertySnapshot,
    RoomSnapshot,
)

__all__ = [
    "BedSnapshot",
    "GraphSnapshot",
    "PropertyCreate",
    "PropertyResponse",
    "PropertySnapshot",
    "RoomSnapshot",
]
