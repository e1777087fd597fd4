"""Database schema management."""

from hostel_core.db.init_db import drop_db, init_db, reset_db

__all__ = ["drop_db", "init_db", "reset_db"]
