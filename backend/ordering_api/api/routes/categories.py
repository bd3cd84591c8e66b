"""Category Routes — CRUD for menu categories.

Invariants:
    - List is ordered by display_order
    - Mutations require the admin role
    - A category still referenced by menu items cannot be deleted (409)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import require_admin
from ordering_api.core.errors import ConflictError, ResourceNotFoundError
from ordering_api.infrastructure.database import get_db
from ordering_api.models import Category, MenuItem
from ordering_api.schemas.menu import CategoryResponse, CategoryWrite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories", tags=["categories"])


async def get_category_or_404(category_id: int, db: AsyncSession) -> Category:
    category = await db.get(Category, category_id)
    if category is None:
        raise ResourceNotFoundError("Category", str(category_id))
    return category


async def _commit_unique(db: AsyncSession, name: str) -> None:
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Category '{name}' already exists")


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Category).order_by(Category.display_order, Category.id),
    )
    return result.scalars().all()


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_category(body: CategoryWrite, db: AsyncSession = Depends(get_db)):
    category = Category(name=body.name, display_order=body.display_order)
    db.add(category)
    await _commit_unique(db, body.name)
    await db.refresh(category)
    return category


@router.put(
    "/{category_id}", response_model=CategoryResponse,
    dependencies=[Depends(require_admin)],
)
async def update_category(
    category_id: int, body: CategoryWrite, db: AsyncSession = Depends(get_db),
):
    category = await get_category_or_404(category_id, db)
    category.name = body.name
    category.display_order = body.display_order
    await _commit_unique(db, body.name)
    await db.refresh(category)
    return category


@router.delete("/{category_id}", dependencies=[Depends(require_admin)])
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await get_category_or_404(category_id, db)
    in_use = await db.scalar(
        select(func.count()).select_from(MenuItem)
        .where(MenuItem.category_id == category_id),
    )
    if in_use:
        raise ConflictError(
            f"Category '{category.name}' still has {in_use} menu item(s)",
        )
    await db.delete(category)
    await db.commit()
    logger.info(f"Category {category_id} deleted")
    return {"message": "Category deleted successfully"}
