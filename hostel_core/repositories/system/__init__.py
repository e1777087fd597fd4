# hostel_core/repositories/system/__init__.py
"""
System repositories package.
"""

from hostel_core.repositories.system.store_revision_repository import StoreRevisionRepository

__all__ = [
    "StoreRevisionRepository",
]
