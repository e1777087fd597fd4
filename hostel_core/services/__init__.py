"""
Service layer.

Services own transaction boundaries: each public write is one
EntityStore transaction and returns detached pydantic schemas.

Example:
    >>> from hostel_core.services.base.service_factory import ServiceFactory
    >>> services = ServiceFactory.from_settings()
    >>> services.occupancy_analytics().occupancy_stats()
"""
