"""Order Assembly — verifies line validation and price snapshots.

Tests cover:
    - Prices and add-on names are copied from the catalog at build time
    - Unknown, unavailable, and mismatched add-on references are rejected
    - Lines keep submission order
"""

import pytest

from ordering_api.core.errors import OrderValidationError
from ordering_api.models import AddOn, MenuItem
from ordering_api.schemas.order import OrderLineWrite
from ordering_api.services.order_assembly import build_order_lines


@pytest.fixture
async def catalog(test_db):
    burger = MenuItem(
        name="Burger", price=10.0,
        add_ons=[AddOn(name="Cheese", price=1.5), AddOn(name="Bacon", price=2.0)],
    )
    soup = MenuItem(name="Soup", price=6.0, add_ons=[AddOn(name="Bread", price=0.5)])
    sold_out = MenuItem(name="Special", price=20.0, is_available=False)
    test_db.add_all([burger, soup, sold_out])
    await test_db.commit()
    return {
        "burger": burger, "soup": soup, "sold_out": sold_out,
        "cheese": burger.add_ons[0], "bacon": burger.add_ons[1],
        "bread": soup.add_ons[0],
    }


async def test_lines_are_priced_from_catalog(test_db, catalog):
    lines, total = await build_order_lines(test_db, [
        OrderLineWrite(
            menu_item_id=catalog["burger"].id, quantity=2,
            add_on_ids=[catalog["cheese"].id, catalog["bacon"].id],
        ),
        OrderLineWrite(menu_item_id=catalog["soup"].id),
    ])

    burger_line, soup_line = lines
    assert burger_line.unit_price == 10.0
    assert burger_line.subtotal == 27.0
    assert [s.name for s in burger_line.selected_add_ons] == ["Cheese", "Bacon"]
    assert [s.price for s in burger_line.selected_add_ons] == [1.5, 2.0]
    assert soup_line.subtotal == 6.0
    assert total == 33.0


async def test_lines_keep_submission_order(test_db, catalog):
    lines, _ = await build_order_lines(test_db, [
        OrderLineWrite(menu_item_id=catalog["soup"].id),
        OrderLineWrite(menu_item_id=catalog["burger"].id),
        OrderLineWrite(menu_item_id=catalog["soup"].id, special_instructions="hot"),
    ])
    assert [line.position for line in lines] == [0, 1, 2]
    assert [line.menu_item_id for line in lines] == [
        catalog["soup"].id, catalog["burger"].id, catalog["soup"].id,
    ]
    assert lines[2].special_instructions == "hot"


async def test_returned_lines_are_not_keyed_to_an_order(test_db, catalog):
    lines, _ = await build_order_lines(test_db, [
        OrderLineWrite(menu_item_id=catalog["soup"].id),
    ])
    assert lines[0].order_id is None
    assert lines[0] not in test_db


async def test_unknown_menu_item_rejected(test_db, catalog):
    with pytest.raises(OrderValidationError) as exc:
        await build_order_lines(test_db, [OrderLineWrite(menu_item_id=999)])
    assert exc.value.field == "lines[0].menu_item_id"


async def test_unavailable_menu_item_rejected(test_db, catalog):
    with pytest.raises(OrderValidationError) as exc:
        await build_order_lines(test_db, [
            OrderLineWrite(menu_item_id=catalog["sold_out"].id),
        ])
    assert "not available" in exc.value.message


async def test_add_on_from_another_item_rejected(test_db, catalog):
    with pytest.raises(OrderValidationError) as exc:
        await build_order_lines(test_db, [
            OrderLineWrite(menu_item_id=catalog["soup"].id),
            OrderLineWrite(
                menu_item_id=catalog["burger"].id,
                add_on_ids=[catalog["bread"].id],
            ),
        ])
    assert exc.value.field == "lines[1].add_on_ids"
    assert exc.value.http_status == 400
