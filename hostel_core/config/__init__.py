"""
Configuration package for the hostel occupancy core.

Environment settings, database engine construction and logging configuration.
"""

from hostel_core.config.database import create_db_engine, create_session_factory
from hostel_core.config.settings import Settings, get_settings

__all__ = ['Settings', 'get_settings', 'create_db_engine', 'create_session_factory']
