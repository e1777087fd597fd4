# hostel_core/repositories/student/__init__.py
"""
Student repositories package.
"""

from hostel_core.repositories.student.student_repository import StudentRepository

__all__ = [
    "StudentRepository",
]
