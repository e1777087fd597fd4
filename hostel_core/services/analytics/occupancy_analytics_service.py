"""
Occupancy analytics: bed totals and dashboard figures.

Every figure in one result comes from a single graph snapshot read in
one transaction, so totals always add up.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from hostel_core.models.base.enums import BedStatus, ComplaintStatus
from hostel_core.schemas.analytics import DashboardStats, OccupancyStats, PropertyOccupancy
from hostel_core.schemas.hostel import GraphSnapshot
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.entity_store import build_snapshot
from hostel_core.services.common.unit_of_work import UnitOfWork

PERCENT = Decimal("0.01")


def occupancy_rate(occupied: int, total: int) -> Decimal:
    """Occupied share of ``total`` in percent, two decimals; 0 when empty."""
    if total == 0:
        return Decimal("0.00")
    return (Decimal(occupied) * 100 / Decimal(total)).quantize(PERCENT, rounding=ROUND_HALF_UP)


def stats_from_snapshot(snapshot: GraphSnapshot) -> OccupancyStats:
    total = occupied = 0
    for bed in snapshot.iter_beds():
        total += 1
        if bed.status == BedStatus.OCCUPIED:
            occupied += 1
    return OccupancyStats(
        total=total,
        occupied=occupied,
        available=total - occupied,
        revision=snapshot.revision,
    )


class OccupancyAnalyticsService(BaseService):
    """Occupancy statistics over consistent snapshots."""

    def occupancy_stats(self, property_id: Optional[str] = None) -> OccupancyStats:
        """
        Bed totals, optionally for one property.

        Raises:
            NotFoundError: Unknown property
        """
        return stats_from_snapshot(self.store.read_graph(property_id))

    def dashboard_stats(self) -> DashboardStats:
        """Counts, occupancy and per-property breakdown at one revision."""

        def load(uow: UnitOfWork) -> DashboardStats:
            snapshot = build_snapshot(uow)
            active_residents = uow.students.count({"is_active": True})
            open_complaints = uow.complaints.count_by_status(
                ComplaintStatus.OPEN
            ) + uow.complaints.count_by_status(ComplaintStatus.IN_PROGRESS)

            breakdown = []
            for prop in snapshot.properties:
                totals = stats_from_snapshot(
                    GraphSnapshot(revision=snapshot.revision, taken_at=snapshot.taken_at, properties=(prop,))
                )
                breakdown.append(
                    PropertyOccupancy(
                        property_id=prop.id,
                        property_name=prop.name,
                        room_count=len(prop.rooms),
                        total_beds=totals.total,
                        occupied_beds=totals.occupied,
                        available_beds=totals.available,
                        occupancy_rate=occupancy_rate(totals.occupied, totals.total),
                    )
                )

            overall = stats_from_snapshot(snapshot)
            return DashboardStats(
                revision=snapshot.revision,
                total_properties=len(snapshot.properties),
                total_rooms=sum(1 for _ in snapshot.iter_rooms()),
                total_beds=overall.total,
                occupied_beds=overall.occupied,
                available_beds=overall.available,
                occupancy_rate=occupancy_rate(overall.occupied, overall.total),
                active_residents=active_residents,
                open_complaints=open_complaints,
                properties=breakdown,
            )

        return self.store.run_read(load)
