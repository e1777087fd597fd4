"""Room and bed models."""

from hostel_core.models.room.bed import Bed
from hostel_core.models.room.room import Room

__all__ = ["Bed", "Room"]
