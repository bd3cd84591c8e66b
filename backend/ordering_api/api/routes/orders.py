"""Order Routes — placement, listing, replacement, status changes, deletion.

Invariants:
    - Lines are priced and snapshotted server-side (services/order_assembly.py)
    - Create/replace/delete go through CompositeWriteCoordinator
    - Every order route requires an authenticated user (any role)
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import get_coordinator, get_current_user
from ordering_api.core.domain_types import OrderStatus
from ordering_api.core.errors import ResourceNotFoundError
from ordering_api.infrastructure.database import get_db
from ordering_api.models import Order
from ordering_api.schemas.order import (
    OrderCreate, OrderResponse, OrderStatusUpdate, OrderUpdate,
)
from ordering_api.services.composite_writes import CompositeWriteCoordinator
from ordering_api.services.composites import ORDER
from ordering_api.services.order_assembly import build_order_lines

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/orders", tags=["orders"],
    dependencies=[Depends(get_current_user)],
)


async def get_order_or_404(order_id: int, db: AsyncSession) -> Order:
    result = await db.execute(
        select(Order)
        .where(Order.id == order_id)
        .options(*ORDER.load_options())
        .execution_options(populate_existing=True),
    )
    order = result.scalar_one_or_none()
    if order is None:
        raise ResourceNotFoundError("Order", str(order_id))
    return order


@router.post(
    "", response_model=OrderResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    db: AsyncSession = Depends(get_db),
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    lines, total = await build_order_lines(db, body.lines)
    order = Order(
        table_number=body.table_number,
        status=OrderStatus.PENDING.value,
        total_amount=total,
        lines=lines,
    )
    return await coordinator.create(ORDER, order)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    status_filter: OrderStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """List orders, newest first."""
    query = (
        select(Order)
        .options(*ORDER.load_options())
        .order_by(Order.created_at.desc(), Order.id.desc())
    )
    if status_filter:
        query = query.where(Order.status == status_filter.value)
    result = await db.execute(query.limit(limit).offset(offset))
    return result.scalars().all()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, db: AsyncSession = Depends(get_db)):
    return await get_order_or_404(order_id, db)


@router.put("/{order_id}", response_model=OrderResponse)
async def replace_order(
    order_id: int,
    body: OrderUpdate,
    db: AsyncSession = Depends(get_db),
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    """Replace table, status and every line of an order.

    A missing order is reported (404) before its new lines are checked (400).
    """
    if await db.scalar(select(Order.id).where(Order.id == order_id)) is None:
        raise ResourceNotFoundError("Order", str(order_id))
    lines, total = await build_order_lines(db, body.lines)
    fields = {
        "table_number": body.table_number,
        "status": body.status.value,
        "total_amount": total,
    }
    return await coordinator.replace_dependents(ORDER, order_id, fields, lines)


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int, body: OrderStatusUpdate, db: AsyncSession = Depends(get_db),
):
    order = await get_order_or_404(order_id, db)
    order.status = body.status.value
    await db.commit()
    logger.info(f"Order {order_id} moved to {body.status.value}")
    return await get_order_or_404(order_id, db)


@router.delete("/{order_id}")
async def delete_order(
    order_id: int,
    coordinator: CompositeWriteCoordinator = Depends(get_coordinator),
):
    await coordinator.cascade_delete(ORDER, order_id)
    return {"message": "Order deleted successfully"}
