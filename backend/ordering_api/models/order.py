"""Order / OrderLine / SelectedAddOn ORM — placed orders and their snapshots.

Invariants:
    - Order owns lines (order_id FK); a line owns its selected add-ons (order_line_id FK)
    - SelectedAddOn copies name and price at order time: later catalog price
      changes never alter historical orders
    - unit_price/subtotal on a line and total_amount on the order are computed
      once at write time (core/order_pricing.py)
    - Collections are never lazy-loaded (lazy="raise")

Design Decisions:
    - add_on_id kept for traceability only; no FK, so deleting a catalog add-on
      leaves order history intact
    - menu_item_id is SET NULL when the menu item is deleted, for the same reason
    - position column preserves the order lines were submitted in
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ordering_api.core.domain_types import OrderStatus
from ordering_api.db.base import Base, TimestampMixin
from ordering_api.models.menu_item import Money


class Order(TimestampMixin, Base):
    """Customer order — composite root owning its lines."""
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    table_number: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.PENDING.value,
        index=True,
    )
    total_amount: Mapped[float] = mapped_column(Money, nullable=False, default=0.0)

    # Relationships
    lines: Mapped[list["OrderLine"]] = relationship(
        "OrderLine", order_by="OrderLine.position", lazy="raise",
    )


class OrderLine(TimestampMixin, Base):
    """One menu item on an order, with quantity and priced snapshot."""
    __tablename__ = "order_lines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    menu_item_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(Money, nullable=False)
    subtotal: Mapped[float] = mapped_column(Money, nullable=False)
    special_instructions: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )

    # Relationships
    selected_add_ons: Mapped[list["SelectedAddOn"]] = relationship(
        "SelectedAddOn", order_by="SelectedAddOn.id", lazy="raise",
    )


class SelectedAddOn(TimestampMixin, Base):
    """Snapshot of an add-on chosen for one order line."""
    __tablename__ = "selected_add_ons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_line_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("order_lines.id", ondelete="CASCADE"), nullable=False,
    )
    add_on_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Money, nullable=False)
