"""
Service factory for dependency injection and service instantiation.
"""

from typing import Dict, Optional

from hostel_core.config.settings import Settings
from hostel_core.core.logging import get_logger
from hostel_core.services.analytics.occupancy_analytics_service import OccupancyAnalyticsService
from hostel_core.services.base.base_service import BaseService
from hostel_core.services.common.entity_store import EntityStore
from hostel_core.services.complaint.complaint_service import ComplaintService
from hostel_core.services.hostel.property_service import PropertyService
from hostel_core.services.payment.billing_service import BillingService
from hostel_core.services.room.bed_allocation_service import BedAllocationService
from hostel_core.services.student.onboarding_service import OnboardingService
from hostel_core.services.student.student_service import StudentService


class ServiceFactory:
    """
    Factory for creating service instances with dependency injection.

    Provides:
    - Centralized service creation over one EntityStore
    - Service caching/reuse
    """

    def __init__(self, store: EntityStore):
        """
        Initialize service factory.

        Args:
            store: Entity store shared by every service
        """
        self.store = store
        self._logger = get_logger(self.__class__.__name__)

        # Service cache to reuse instances
        self._service_cache: Dict[str, BaseService] = {}

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ServiceFactory":
        """Build the store from configuration and wrap it in a factory."""
        return cls(EntityStore.from_settings(settings))

    def _cached(self, key: str, build) -> BaseService:
        if key not in self._service_cache:
            self._service_cache[key] = build()
            self._logger.debug(f"Created service: {key}")
        return self._service_cache[key]

    # -------------------------------------------------------------------------
    # Service Getters
    # -------------------------------------------------------------------------

    def bed_allocation(self) -> BedAllocationService:
        return self._cached("bed_allocation", lambda: BedAllocationService(self.store))

    def onboarding(self) -> OnboardingService:
        return self._cached(
            "onboarding",
            lambda: OnboardingService(self.store, self.bed_allocation()),
        )

    def students(self) -> StudentService:
        return self._cached("students", lambda: StudentService(self.store))

    def billing(self) -> BillingService:
        return self._cached("billing", lambda: BillingService(self.store))

    def complaints(self) -> ComplaintService:
        return self._cached("complaints", lambda: ComplaintService(self.store))

    def occupancy_analytics(self) -> OccupancyAnalyticsService:
        return self._cached("occupancy_analytics", lambda: OccupancyAnalyticsService(self.store))

    def properties(self) -> PropertyService:
        return self._cached("properties", lambda: PropertyService(self.store))

    def clear_cache(self) -> None:
        self._service_cache.clear()
