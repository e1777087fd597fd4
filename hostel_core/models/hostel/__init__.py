"""Property models."""

from hostel_core.models.hostel.property import Property

__all__ = ["Property"]
