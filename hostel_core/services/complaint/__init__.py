"""
Complaint services.
"""

from hostel_core.services.complaint.complaint_service import ALLOWED_TRANSITIONS, ComplaintService

__all__ = ["ALLOWED_TRANSITIONS", "ComplaintService"]
