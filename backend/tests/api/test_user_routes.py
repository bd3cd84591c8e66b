"""User Routes — verifies admin-only account management."""

from ordering_api.models import User


async def test_create_user_and_login(client, admin_headers):
    res = await client.post(
        "/api/users",
        json={"username": "bob", "email": "bob@example.com", "password": "bob-password"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    assert res.json()["role"] == "staff"
    assert "password" not in res.json()
    assert "password_hash" not in res.json()

    login = await client.post(
        "/api/login", json={"username": "bob", "password": "bob-password"},
    )
    assert login.status_code == 200


async def test_duplicate_username_returns_409(client, admin_headers):
    body = {"username": "admin", "email": "other@example.com", "password": "whatever-123"}
    res = await client.post("/api/users", json=body, headers=admin_headers)
    assert res.status_code == 409


async def test_partial_update_keeps_other_fields(client, admin_headers, staff_user):
    res = await client.put(
        f"/api/users/{staff_user.id}", json={"role": "admin"}, headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["role"] == "admin"
    assert res.json()["email"] == "staff@example.com"


async def test_password_change_takes_effect(client, admin_headers, staff_user):
    await client.put(
        f"/api/users/{staff_user.id}", json={"password": "new-password"}, headers=admin_headers,
    )
    old = await client.post("/api/login", json={"username": "staff", "password": "staff-password"})
    new = await client.post("/api/login", json={"username": "staff", "password": "new-password"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_delete_user(client, admin_headers, staff_user, count_rows):
    res = await client.delete(f"/api/users/{staff_user.id}", headers=admin_headers)
    assert res.status_code == 200
    assert await count_rows(User, User.id == staff_user.id) == 0


async def test_admin_cannot_delete_self(client, admin_headers, admin_user):
    res = await client.delete(f"/api/users/{admin_user.id}", headers=admin_headers)
    assert res.status_code == 409


async def test_staff_cannot_list_users(client, staff_headers):
    res = await client.get("/api/users", headers=staff_headers)
    assert res.status_code == 403
