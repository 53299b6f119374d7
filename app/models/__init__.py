"""Models Package - Export all models for easy imports"""

from app.models.base import BaseModel, PersonMixin
from app.models.enums import UserCategory
from app.models.user import Admin, Teacher, Parent, Student


__all__ = [
    # Base classes
    "BaseModel",
    "PersonMixin",

    # Enums
    "UserCategory",

    # People
    "Admin",
    "Teacher",
    "Parent",
    "Student",
]
