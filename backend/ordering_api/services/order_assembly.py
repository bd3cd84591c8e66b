"""Order Assembly — turns requested lines into priced, snapshotted OrderLine rows.

Invariants:
    - Every line's menu item exists and is available
    - Every requested add-on belongs to that line's menu item
    - unit_price and add-on name/price are copied from the catalog NOW; the
      resulting rows never reference live catalog prices again
    - Returned rows are transient (not in any session) and carry no order_id;
      the coordinator re-keys them inside its transaction

Design Decisions:
    - Catalog read happens before the write transaction; the coordinator's
      transaction only contains writes
"""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering_api.core.errors import OrderValidationError
from ordering_api.core.order_pricing import order_total, price_line
from ordering_api.models import MenuItem, OrderLine, SelectedAddOn
from ordering_api.schemas.order import OrderLineWrite


async def build_order_lines(
    db: AsyncSession, lines_in: Sequence[OrderLineWrite],
) -> tuple[list[OrderLine], float]:
    """Resolve, validate and price lines. Returns (lines, order total)."""
    item_ids = {line.menu_item_id for line in lines_in}
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.id.in_(item_ids))
        .options(selectinload(MenuItem.add_ons)),
    )
    items = {item.id: item for item in result.scalars().all()}

    lines = []
    for position, line_in in enumerate(lines_in):
        field = f"lines[{position}]"
        item = items.get(line_in.menu_item_id)
        if item is None:
            raise OrderValidationError(
                f"Menu item {line_in.menu_item_id} does not exist",
                f"{field}.menu_item_id",
            )
        if not item.is_available:
            raise OrderValidationError(
                f"Menu item '{item.name}' is not available",
                f"{field}.menu_item_id",
            )
        offered = {add_on.id: add_on for add_on in item.add_ons}
        selected = []
        for add_on_id in line_in.add_on_ids:
            add_on = offered.get(add_on_id)
            if add_on is None:
                raise OrderValidationError(
                    f"Add-on {add_on_id} is not offered for menu item '{item.name}'",
                    f"{field}.add_on_ids",
                )
            selected.append(SelectedAddOn(
                add_on_id=add_on.id, name=add_on.name, price=add_on.price,
            ))
        lines.append(OrderLine(
            menu_item_id=item.id,
            position=position,
            quantity=line_in.quantity,
            unit_price=item.price,
            subtotal=price_line(
                item.price, (s.price for s in selected), line_in.quantity,
            ),
            special_instructions=line_in.special_instructions,
            selected_add_ons=selected,
        ))
    return lines, order_total(line.subtotal for line in lines)
