# hostel_core/repositories/hostel/__init__.py
"""
Hostel property repositories package.
"""

from hostel_core.repositories.hostel.property_repository import PropertyRepository

__all__ = [
    "PropertyRepository",
]
