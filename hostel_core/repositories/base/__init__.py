"""
Base repository package.
"""

from hostel_core.repositories.base.base_repository import BaseRepository, ModelType

__all__ = [
    "BaseRepository",
    "ModelType",
]
