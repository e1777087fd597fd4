# --- File: hostel_core/schemas/analytics/occupancy_analytics.py ---
"""
Occupancy analytics schemas.

All figures in one response are computed from a single graph snapshot,
identified by ``revision``.
"""

from decimal import Decimal
from typing import List

from pydantic import Field

from hostel_core.schemas.common.base import FrozenSchema

__all__ = [
    "OccupancyStats",
    "PropertyOccupancy",
    "DashboardStats",
]


class OccupancyStats(FrozenSchema):
    """Bed totals; ``total == occupied + available`` always holds."""

    total: int = Field(..., ge=0)
    occupied: int = Field(..., ge=0)
    available: int = Field(..., ge=0)
    revision: int = Field(..., ge=0, description="Snapshot revision the figures come from")


class PropertyOccupancy(FrozenSchema):
    """Per-property breakdown for the dashboard."""

    property_id: str
    property_name: str
    room_count: int = Field(..., ge=0)
    total_beds: int = Field(..., ge=0)
    occupied_beds: int = Field(..., ge=0)
    available_beds: int = Field(..., ge=0)
    occupancy_rate: Decimal = Field(..., description="Occupied share in percent")


class DashboardStats(FrozenSchema):
    """Headline figures for the management dashboard."""

    revision: int = Field(..., ge=0)
    total_properties: int = Field(..., ge=0)
    total_rooms: int = Field(..., ge=0)
    total_beds: int = Field(..., ge=0)
    occupied_beds: int = Field(..., ge=0)
    available_beds: int = Field(..., ge=0)
    occupancy_rate: Decimal = Field(..., description="Occupied share in percent")
    active_residents: int = Field(..., ge=0)
    open_complaints: int = Field(..., ge=0)
    properties: List[PropertyOccupancy] = Field(default_factory=list)
