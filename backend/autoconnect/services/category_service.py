"""Category Service - create, list, fetch and replace categories."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from autoconnect.core.errors import ResourceNotFoundError
from autoconnect.infrastructure.database import translate_db_errors
from autoconnect.models.category import Category
from autoconnect.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)

RESOURCE = "Category"


async def create_category(db: AsyncSession, payload: CategoryCreate) -> Category:
    category = Category(**payload.model_dump())
    async with translate_db_errors(db, "insert"):
        db.add(category)
        await db.commit()
        await db.refresh(category)
    return category


async def list_categories(db: AsyncSession) -> list[Category]:
    async with translate_db_errors(db, "select"):
        result = await db.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())


async def get_category(db: AsyncSession, category_id: UUID) -> Category:
    async with translate_db_errors(db, "select"):
        category = await db.get(Category, category_id)
    if category is None:
        raise ResourceNotFoundError(RESOURCE, str(category_id))
    return category


async def update_category(
    db: AsyncSession, category_id: UUID, payload: CategoryCreate,
) -> Category:
    """Replace every field of an existing category."""
    category = await get_category(db, category_id)
    for field, value in payload.model_dump().items():
        setattr(category, field, value)
    async with translate_db_errors(db, "update"):
        await db.commit()
        await db.refresh(category)
    logger.info("Category updated", extra={"resource_id": str(category_id)})
    return category
