"""Category Routes - transaction categories (income/expense labels with color and icon)."""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from autoconnect.api.contract import validate_write
from autoconnect.core.request_contract import CATEGORY_REQUIRED_FIELDS
from autoconnect.infrastructure.database import get_db
from autoconnect.models.category import Category
from autoconnect.schemas.category import CategoryCreate, CategoryResponse
from autoconnect.services import category_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories", tags=["categories"])


def _serialize(category: Category) -> dict:
    return CategoryResponse.model_validate(category).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_category(
    body: dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db),
):
    payload = validate_write(CategoryCreate, body, CATEGORY_REQUIRED_FIELDS)
    category = await category_service.create_category(db, payload)
    return {
        "message": "Category added successfully",
        "category": _serialize(category),
    }


@router.get("")
async def list_categories(db: AsyncSession = Depends(get_db)):
    return [_serialize(c) for c in await category_service.list_categories(db)]


@router.get("/{category_id}")
async def get_category(category_id: UUID, db: AsyncSession = Depends(get_db)):
    return _serialize(await category_service.get_category(db, category_id))


@router.put("/{category_id}")
async def update_category(
    category_id: UUID,
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    payload = validate_write(CategoryCreate, body, CATEGORY_REQUIRED_FIELDS)
    category = await category_service.update_category(db, category_id, payload)
    return {
        "message": "Category updated successfully",
        "category": _serialize(category),
    }
