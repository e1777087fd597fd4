"""
Analytics services.
"""

from hostel_core.services.analytics.occupancy_analytics_service import (
    OccupancyAnalyticsService,
    occupancy_rate,
    stats_from_snapshot,
)

__all__ = [
    "OccupancyAnalyticsService",
    "occupancy_rate",
    "stats_from_snapshot",
]
