# --- File: hostel_core/schemas/complaint/__init__.py ---
"""
Complaint schemas package.
"""

from hostel_core.schemas.complaint.complaint_base import ComplaintCreate, ComplaintFilter
from hostel_core.schemas.complaint.complaint_response import ComplaintResponse

__all__ = [
    "ComplaintCreate",
    "ComplaintFilter",
    "ComplaintResponse",
]
