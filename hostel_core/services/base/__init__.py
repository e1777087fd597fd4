"""
Service base classes and wiring.
"""

from hostel_core.services.base.base_service import BaseService

__all__ = ["BaseService"]
