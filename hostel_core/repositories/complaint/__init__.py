# hostel_core/repositories/complaint/__init__.py
"""
Complaint repositories package.
"""

from hostel_core.repositories.complaint.complaint_repository import ComplaintRepository

__all__ = [
    "ComplaintRepository",
]
