"""Dashboard Card Schemas"""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import UserCategory


CardBackground = Literal["lightGreen", "lightYellow"]


class UserCardView(BaseModel):
    """Everything needed to draw one count card"""
    model_config = ConfigDict(frozen=True)

    category: UserCategory
    count: int = Field(..., ge=0)
    label: str
    position: int = Field(0, ge=0, description="Index among sibling cards")
    background: CardBackground
