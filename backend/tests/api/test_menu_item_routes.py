"""Menu Item Routes — verifies composite create/replace/delete over HTTP.

Tests cover:
    - POST creates an item with its add-ons (201)
    - PUT replaces the complete add-on set
    - DELETE removes the item and its add-ons; unknown ids return 404
    - Unknown category returns 404; reads are public, writes need admin
"""

import pytest

from ordering_api.models import AddOn

BURGER = {
    "name": "Burger", "price": 10.0, "description": "Beef patty",
    "add_ons": [{"name": "Cheese", "price": 1.5}, {"name": "Bacon", "price": 2.0}],
}


@pytest.fixture
async def burger(client, admin_headers) -> dict:
    res = await client.post("/api/menu-items", json=BURGER, headers=admin_headers)
    assert res.status_code == 201
    return res.json()


async def test_create_returns_item_with_add_ons(burger):
    assert burger["name"] == "Burger"
    assert [a["name"] for a in burger["add_ons"]] == ["Cheese", "Bacon"]
    assert all(a["menu_item_id"] == burger["id"] for a in burger["add_ons"])


async def test_reads_are_public(client, burger):
    listed = await client.get("/api/menu-items")
    single = await client.get(f"/api/menu-items/{burger['id']}")
    assert listed.status_code == 200
    assert len(listed.json()) == 1
    assert single.json()["add_ons"] == burger["add_ons"]


async def test_list_filters_by_category(client, admin_headers):
    category = (await client.post(
        "/api/categories", json={"name": "Mains"}, headers=admin_headers,
    )).json()
    await client.post("/api/menu-items", json=BURGER, headers=admin_headers)
    await client.post(
        "/api/menu-items",
        json={**BURGER, "name": "Steak", "category_id": category["id"]},
        headers=admin_headers,
    )

    res = await client.get("/api/menu-items", params={"category_id": category["id"]})

    assert [item["name"] for item in res.json()] == ["Steak"]


async def test_put_replaces_add_on_set(client, admin_headers, burger, count_rows):
    res = await client.put(
        f"/api/menu-items/{burger['id']}",
        json={"name": "Burger", "price": 11.0, "add_ons": [{"name": "Egg", "price": 1.0}]},
        headers=admin_headers,
    )

    assert res.status_code == 200
    body = res.json()
    assert body["price"] == 11.0
    assert [a["name"] for a in body["add_ons"]] == ["Egg"]
    assert body["created_at"] == burger["created_at"]
    assert await count_rows(AddOn) == 1


async def test_put_unknown_item_returns_404(client, admin_headers):
    res = await client.put("/api/menu-items/999", json=BURGER, headers=admin_headers)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_unknown_category_returns_404(client, admin_headers):
    res = await client.post(
        "/api/menu-items", json={**BURGER, "category_id": 999}, headers=admin_headers,
    )
    assert res.status_code == 404


async def test_negative_price_returns_400(client, admin_headers):
    res = await client.post(
        "/api/menu-items", json={**BURGER, "price": -1}, headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_delete_removes_item_and_add_ons(client, admin_headers, burger, count_rows):
    res = await client.delete(f"/api/menu-items/{burger['id']}", headers=admin_headers)
    assert res.status_code == 200
    assert (await client.get(f"/api/menu-items/{burger['id']}")).status_code == 404
    assert await count_rows(AddOn) == 0


async def test_delete_unknown_item_returns_404(client, admin_headers):
    res = await client.delete("/api/menu-items/999", headers=admin_headers)
    assert res.status_code == 404


async def test_staff_cannot_write(client, staff_headers):
    res = await client.post("/api/menu-items", json=BURGER, headers=staff_headers)
    assert res.status_code == 403
