"""Order Schemas — order placement, replacement, and status changes.

Invariants:
    - An order has at least one line; quantity >= 1
    - Lines reference add-ons by catalog id; names/prices are snapshotted server-side
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ordering_api.core.domain_types import OrderStatus


class OrderLineWrite(BaseModel):
    menu_item_id: int
    quantity: int = Field(1, ge=1, le=100)
    add_on_ids: list[int] = Field(default_factory=list)
    special_instructions: str = Field("", max_length=500)


class OrderCreate(BaseModel):
    table_number: str = Field(min_length=1, max_length=10)
    lines: list[OrderLineWrite] = Field(min_length=1)


class OrderUpdate(BaseModel):
    """Full replacement: lines replaces every existing line."""
    table_number: str = Field(min_length=1, max_length=10)
    status: OrderStatus = OrderStatus.PENDING
    lines: list[OrderLineWrite] = Field(min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class SelectedAddOnResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    add_on_id: int | None
    name: str
    price: float


class OrderLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    menu_item_id: int | None
    position: int
    quantity: int
    unit_price: float
    subtotal: float
    special_instructions: str
    selected_add_ons: list[SelectedAddOnResponse]


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    table_number: str
    status: OrderStatus
    total_amount: float
    lines: list[OrderLineResponse]
    created_at: datetime
    updated_at: datetime
