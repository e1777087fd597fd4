"""
Hostel property services.
"""

from hostel_core.services.hostel.property_service import PropertyService

__all__ = ["PropertyService"]
