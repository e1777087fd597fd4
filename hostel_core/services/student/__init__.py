"""
Student services: onboarding and resident lifecycle.
"""

from hostel_core.services.student.onboarding_service import OnboardingService
from hostel_core.services.student.student_service import StudentService, build_resident_view

__all__ = [
    "OnboardingService",
    "StudentService",
    "build_resident_view",
]
