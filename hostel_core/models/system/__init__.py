"""System bookkeeping models."""

from hostel_core.models.system.store_revision import STORE_REVISION_ROW_ID, StoreRevision

__all__ = ["STORE_REVISION_ROW_ID", "StoreRevision"]
