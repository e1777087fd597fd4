# --- File: hostel_core/schemas/analytics/__init__.py ---
"""
Analytics schemas package.
"""

from hostel_core.schemas.analytics.occupancy_analytics import (
    DashboardStats,
    OccupancyStats,
    PropertyOccupancy,
)

__all__ = [
    "DashboardStats",
    "OccupancyStats",
    "PropertyOccupancy",
]
