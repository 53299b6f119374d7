"""People Models: one table per dashboard category"""

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from app.models.base import BaseModel, PersonMixin


class Admin(BaseModel):
    """School administrator account"""
    __tablename__ = "admins"

    username = Column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Admin {self.username}>"


class Teacher(BaseModel, PersonMixin):
    """Teaching staff member"""
    __tablename__ = "teachers"

    username = Column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Teacher {self.username}>"


class Parent(BaseModel, PersonMixin):
    """Parent or guardian of one or more students"""
    __tablename__ = "parents"

    username = Column(String(255), unique=True, nullable=False, index=True)

    students = relationship("Student", back_populates="parent")

    def __repr__(self) -> str:
        return f"<Parent {self.username}>"


class Student(BaseModel, PersonMixin):
    """Enrolled student, linked to a parent"""
    __tablename__ = "students"

    username = Column(String(255), unique=True, nullable=False, index=True)
    parent_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("parents.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    parent = relationship("Parent", back_populates="students")

    def __repr__(self) -> str:
        return f"<Student {self.username}>"
