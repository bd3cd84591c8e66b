"""Menu Item Routes — catalog reads and composite writes of items with add-ons.

Invariants:
    - Reads always eager-load add-ons (collections are never lazy-loaded)
    - Create/update/delete go through CompositeWriteCoordinator: the item and its
      add-on set change together or not at all
    - PUT replaces the add-on set wholesale
    - Mutations require the admin role
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import get_coordinator, require_admin
from ordering_api.api.routes.categories import get_category_or_404
from ordering_api.core.errors import ResourceNotFoundError
from ordering_api.infrastructure.database import get_db
from ordering_api.models import AddOn, MenuItem
from ordering_api.schemas.menu import MenuItemResponse, MenuItemWrite
from ordering_api.services.composite_writes import CompositeWriteCoordinator
from ordering_api.services.composites import MENU_ITEM

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/menu-items", tags=["menu-items"])


def _add_ons_from(body: MenuItemWrite) -> list[AddOn]:
    return [AddOn(name=a.name, price=a.price) for a in body.add_ons]


@router.get("", response_model=list[MenuItemResponse])
async def list_menu_items(
    category_id: int | None = None, db: AsyncSession = Depends(get_db),
):
    query = select(MenuItem).options(*MENU_ITEM.load_options()).order_by(MenuItem.id)
    if category_id is not None:
        query = query.where(MenuItem.category_id == category_id)
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{item_id}", response_model=MenuItemResponse)
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.id == item_id)
        .options(*MENU_ITEM.load_options()),
    )
    item = result.scalar_one_or_none()
    if item is None:
        raise ResourceNotFoundError("MenuItem", str(item_id))
    return item


@router.post(
    "", response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_menu_item(
    body: MenuItemWrite,
    db: AsyncSession = Depends(get_db),
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    if body.category_id is not None:
        await get_category_or_404(body.category_id, db)
    item = MenuItem(**body.item_fields(), add_ons=_add_ons_from(body))
    return await coordinator.create(MENU_ITEM, item)


@router.put(
    "/{item_id}", response_model=MenuItemResponse,
    dependencies=[Depends(require_admin)],
)
async def update_menu_item(
    item_id: int,
    body: MenuItemWrite,
    db: AsyncSession = Depends(get_db),
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    """Replace item fields and its complete add-on set."""
    if body.category_id is not None:
        await get_category_or_404(body.category_id, db)
    return await coordinator.replace_dependents(
        MENU_ITEM, item_id, body.item_fields(), _add_ons_from(body),
    )


@router.delete("/{item_id}", dependencies=[Depends(require_admin)])
async def delete_menu_item(
    item_id: int,
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    await coordinator.cascade_delete(MENU_ITEM, item_id)
    return {"message": "Menu item deleted successfully"}
