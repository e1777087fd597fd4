# --- File: hostel_core/schemas/student/__init__.py ---
"""
Student schemas package.
"""

from hostel_core.schemas.student.onboarding import OnboardingRequest, OnboardingResult
from hostel_core.schemas.student.student_base import StudentProfile, StudentUpdate
from hostel_core.schemas.student.student_response import ResidentView, StudentResponse

__all__ = [
    "OnboardingRequest",
    "OnboardingResult",
    "ResidentView",
    "StudentProfile",
    "StudentResponse",
    "StudentUpdate",
]
