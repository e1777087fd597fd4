"""
Room and bed allocation services.
"""

from hostel_core.services.room.bed_allocation_service import BedAllocationService

__all__ = ["BedAllocationService"]
