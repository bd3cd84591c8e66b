"""Composite Definitions — the aggregates written through the coordinator.

Invariants:
    - MENU_ITEM: MenuItem -> AddOn (menu_item_id)
    - ORDER: Order -> OrderLine (order_id) -> SelectedAddOn (order_line_id)
"""

from ordering_api.models import AddOn, MenuItem, Order, OrderLine, SelectedAddOn
from ordering_api.services.composite_writes import Composite, DependentLink


MENU_ITEM = Composite(
    name="MenuItem",
    parent=MenuItem,
    dependent=DependentLink(
        model=AddOn, foreign_key="menu_item_id", relationship="add_ons",
    ),
)

ORDER = Composite(
    name="Order",
    parent=Order,
    dependent=DependentLink(
        model=OrderLine, foreign_key="order_id", relationship="lines",
        children=(
            DependentLink(
                model=SelectedAddOn, foreign_key="order_line_id",
                relationship="selected_add_ons",
            ),
        ),
    ),
)
