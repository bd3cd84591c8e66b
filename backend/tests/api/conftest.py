"""API test fixtures — FastAPI test client over the test database.

Invariants:
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so coordinator transactions hit the test DB too
    - Tokens are signed with the same settings the app verifies against

Design Decisions:
    - Users inserted directly instead of through /api/users: auth fixtures
      must not depend on the routes under test
"""

import pytest
from httpx import ASGITransport, AsyncClient

import ordering_api.infrastructure.database as db_module
from ordering_api.config import get_settings
from ordering_api.infrastructure.database import get_db
from ordering_api.infrastructure.security import create_access_token, hash_password
from ordering_api.main import app
from ordering_api.models import User


@pytest.fixture
async def client(storage, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = storage

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _make_user(db, username: str, role: str) -> User:
    user = User(
        username=username, email=f"{username}@example.com",
        password_hash=hash_password(f"{username}-password"), role=role,
    )
    db.add(user)
    await db.commit()
    return user


def _auth_header(user: User) -> dict:
    settings = get_settings()
    token = create_access_token(
        user.username, user.role, settings.jwt_secret, settings.jwt_algorithm,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def admin_user(test_db) -> User:
    return await _make_user(test_db, "admin", "admin")


@pytest.fixture
async def staff_user(test_db) -> User:
    return await _make_user(test_db, "staff", "staff")


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return _auth_header(admin_user)


@pytest.fixture
def staff_headers(staff_user) -> dict:
    return _auth_header(staff_user)
