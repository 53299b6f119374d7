"""Base Models and Mixins for DRY principles"""

import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, String, Uuid

from app.database import Base


class BaseModel(Base):
    """
    Base model class with common fields for all models.

    Provides:
    - UUID primary key
    - created_at timestamp
    - updated_at timestamp
    """
    __abstract__ = True

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class PersonMixin:
    """
    Mixin for people with contact details (teachers, students, parents).

    Provides:
    - name / surname
    - optional email and phone
    - postal address
    """
    name = Column(String(255), nullable=False)
    surname = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(50), unique=True, nullable=True)
    address = Column(String(500), nullable=False, default="")

    @property
    def full_name(self) -> str:
        """Get person's full name"""
        return f"{self.name} {self.surname}"
