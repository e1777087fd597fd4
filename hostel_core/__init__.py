"""
Hostel occupancy core.

Keeps bed occupancy, room capacity and resident bookings consistent
under concurrent writes, and onboards residents atomically.
"""

__version__ = "1.0.0"
