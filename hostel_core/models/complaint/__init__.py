"""Complaint models."""

from hostel_core.models.complaint.complaint import Complaint

__all__ = ["Complaint"]
