"""Centralized Enum Definitions"""

import enum


class UserCategory(str, enum.Enum):
    """Kinds of people a dashboard count card can summarize"""
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"
