"""API Dependencies"""

from fastapi import Path

from app.database import get_db
from app.models.enums import UserCategory


async def get_category(
    category: UserCategory = Path(..., description="admin, teacher, student or parent")
) -> UserCategory:
    """Category path parameter; FastAPI rejects anything outside the enum with 422"""
    return category


__all__ = ["get_db", "get_category"]
