"""Standardized API Response Schemas"""

from typing import Generic, TypeVar
from pydantic import BaseModel


T = TypeVar('T')


class SuccessResponse(BaseModel, Generic[T]):
    """
    Standard success response envelope.

    Example:
        {
            "success": true,
            "data": [...],
            "message": "Operation successful"
        }
    """
    success: bool = True
    data: T
    message: str = "Operation successful"
