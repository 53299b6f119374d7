from typing import Any, List
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.components.user_card import (
    DEFAULT_CATEGORIES,
    build_user_card,
    render_user_card,
    render_user_cards,
)
from app.core.rate_limit import current_limit, limiter
from app.models.enums import UserCategory
from app.schemas.dashboard import UserCardView
from app.schemas.responses import SuccessResponse

router = APIRouter()


@router.get("/user-cards", response_class=HTMLResponse)
@limiter.limit(current_limit)
async def get_user_cards(
    request: Request,
    db: AsyncSession = Depends(deps.get_db)
) -> HTMLResponse:
    """
    Admin, teacher, student and parent cards as one HTML row.
    """
    return HTMLResponse(await render_user_cards(db))


@router.get("/user-cards/{category}", response_class=HTMLResponse)
@limiter.limit(current_limit)
async def get_user_card(
    request: Request,
    category: UserCategory = Depends(deps.get_category),
    position: int = Query(0, ge=0, description="Index among sibling cards"),
    db: AsyncSession = Depends(deps.get_db)
) -> HTMLResponse:
    """
    Single count card as an HTML fragment.
    """
    return HTMLResponse(await render_user_card(db, category, position))


@router.get("/counts", response_model=SuccessResponse[List[UserCardView]])
async def get_counts(
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Card data for every category, in dashboard order.
    """
    cards = [
        await build_user_card(db, category, position)
        for position, category in enumerate(DEFAULT_CATEGORIES)
    ]
    return SuccessResponse(data=cards)
