"""Count Service - per-category record counts for dashboard cards"""

from types import MappingProxyType
from typing import Dict, Mapping, Type, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.models.enums import UserCategory
from app.models.user import Admin, Parent, Student, Teacher

logger = get_logger(__name__)

PersonModel = Union[Type[Admin], Type[Teacher], Type[Student], Type[Parent]]

CATEGORY_MODELS: Mapping[UserCategory, PersonModel] = MappingProxyType({
    UserCategory.ADMIN: Admin,
    UserCategory.TEACHER: Teacher,
    UserCategory.STUDENT: Student,
    UserCategory.PARENT: Parent,
})

CATEGORY_LABELS: Mapping[UserCategory, str] = MappingProxyType({
    UserCategory.ADMIN: "Administradores",
    UserCategory.TEACHER: "Profesores",
    UserCategory.STUDENT: "Estudiantes",
    UserCategory.PARENT: "Padres",
})


def _check_exhaustive(table: Mapping[UserCategory, object], name: str) -> None:
    missing = set(UserCategory) - set(table)
    if missing:
        raise RuntimeError(
            f"{name} has no entry for: {', '.join(sorted(c.value for c in missing))}"
        )


_check_exhaustive(CATEGORY_MODELS, "CATEGORY_MODELS")
_check_exhaustive(CATEGORY_LABELS, "CATEGORY_LABELS")


def get_label(category: UserCategory) -> str:
    """Localized display label for a category"""
    return CATEGORY_LABELS[category]


class CountService:
    """Service layer for dashboard counts"""

    @staticmethod
    def get_model(category: UserCategory) -> PersonModel:
        return CATEGORY_MODELS[category]

    @staticmethod
    async def count(db: AsyncSession, category: UserCategory) -> int:
        """
        Count every stored record of a category.

        Database errors are not caught here; they reach the caller as raised
        by the driver.

        Args:
            db: Database session
            category: Which table to count

        Returns:
            Number of rows in the category's table
        """
        model = CountService.get_model(category)
        result = await db.execute(select(func.count()).select_from(model))
        total = result.scalar_one()
        logger.debug(
            "Counted records",
            extra={"category": category.value, "table": model.__tablename__, "count": total}
        )
        return total

    @staticmethod
    async def count_all(db: AsyncSession) -> Dict[UserCategory, int]:
        """Count each category in declaration order, one query at a time"""
        counts: Dict[UserCategory, int] = {}
        for category in UserCategory:
            counts[category] = await CountService.count(db, category)
        return counts
