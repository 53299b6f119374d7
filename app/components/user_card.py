"""User count card: a category's record count with its label"""

from html import escape
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import UserCategory
from app.schemas.dashboard import CardBackground, UserCardView
from app.services.count_service import CountService, get_label

CARD_CLASSES = "rounded-2xl {background} text-white p-4 flex-1 min-w-[130px]"
COUNT_CLASSES = "text-2xl text-white font-semibold my-4 text-center"
LABEL_CLASSES = "text-sm text-white font-medium text-center"
ROW_CLASSES = "flex gap-4 justify-between flex-wrap"

# Dashboard order of the cards on the admin page
DEFAULT_CATEGORIES = (
    UserCategory.ADMIN,
    UserCategory.TEACHER,
    UserCategory.STUDENT,
    UserCategory.PARENT,
)


def background_for(position: int) -> CardBackground:
    """First, third, ... card is green; second, fourth, ... is yellow."""
    return "lightGreen" if position % 2 == 0 else "lightYellow"


async def build_user_card(
    db: AsyncSession,
    category: UserCategory,
    position: int = 0,
) -> UserCardView:
    """
    Count the category's records and assemble the card data.

    A failing count query is re-raised unchanged; there is no fallback value.
    """
    count = await CountService.count(db, category)
    return UserCardView(
        category=category,
        count=count,
        label=get_label(category),
        position=position,
        background=background_for(position),
    )


def render_card_html(card: UserCardView) -> str:
    """Markup for a single card"""
    return (
        f'<div class="{CARD_CLASSES.format(background="bg-" + card.background)}"'
        f' data-category="{escape(card.category.value)}">'
        f'<div class="flex justify-between items-center"></div>'
        f'<h1 class="{COUNT_CLASSES}">{card.count}</h1>'
        f'<h2 class="{LABEL_CLASSES}">{escape(card.label)}</h2>'
        f'</div>'
    )


async def render_user_card(
    db: AsyncSession,
    category: UserCategory,
    position: int = 0,
) -> str:
    card = await build_user_card(db, category, position)
    return render_card_html(card)


async def render_user_cards(
    db: AsyncSession,
    categories: Iterable[UserCategory] = DEFAULT_CATEGORIES,
) -> str:
    """Row of cards, each one awaited before the next is started."""
    cards = []
    for position, category in enumerate(categories):
        cards.append(await render_user_card(db, category, position))
    return f'<div class="{ROW_CLASSES}">{"".join(cards)}</div>'
