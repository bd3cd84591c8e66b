"""Category Routes — verifies CRUD, ordering, and conflict handling."""

from ordering_api.models import MenuItem


async def test_create_and_list_in_display_order(client, admin_headers):
    await client.post("/api/categories", json={"name": "Desserts", "display_order": 2}, headers=admin_headers)
    await client.post("/api/categories", json={"name": "Mains", "display_order": 1}, headers=admin_headers)

    res = await client.get("/api/categories")

    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Mains", "Desserts"]


async def test_duplicate_name_returns_409(client, admin_headers):
    await client.post("/api/categories", json={"name": "Mains"}, headers=admin_headers)
    res = await client.post("/api/categories", json={"name": "Mains"}, headers=admin_headers)
    assert res.status_code == 409


async def test_update_category(client, admin_headers):
    created = (await client.post(
        "/api/categories", json={"name": "Mains"}, headers=admin_headers,
    )).json()
    res = await client.put(
        f"/api/categories/{created['id']}",
        json={"name": "Main Courses", "display_order": 3},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Main Courses"
    assert res.json()["display_order"] == 3


async def test_delete_unknown_category_returns_404(client, admin_headers):
    res = await client.delete("/api/categories/999", headers=admin_headers)
    assert res.status_code == 404


async def test_delete_category_in_use_returns_409(client, admin_headers, test_db):
    created = (await client.post(
        "/api/categories", json={"name": "Mains"}, headers=admin_headers,
    )).json()
    test_db.add(MenuItem(name="Steak", price=20.0, category_id=created["id"]))
    await test_db.commit()

    res = await client.delete(f"/api/categories/{created['id']}", headers=admin_headers)

    assert res.status_code == 409


async def test_delete_empty_category(client, admin_headers):
    created = (await client.post(
        "/api/categories", json={"name": "Mains"}, headers=admin_headers,
    )).json()
    res = await client.delete(f"/api/categories/{created['id']}", headers=admin_headers)
    assert res.status_code == 200
    assert (await client.get("/api/categories")).json() == []
