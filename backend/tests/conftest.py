"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment is pinned before any ordering_api module reads settings
    - Every test gets a fresh in-memory SQLite database

Design Decisions:
    - StaticPool: every session (request, coordinator, assertion) shares the one
      in-memory database
    - storage is a real DatabaseSessionManager bound to the test engine, so
      transaction scopes behave exactly as in production
"""

import os

# Ensure tests never reach a real database or a production secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from ordering_api.db.base import Base  # noqa: E402
from ordering_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
import ordering_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def storage(test_engine, test_session_factory) -> DatabaseSessionManager:
    """DatabaseSessionManager bound to the test engine (no pool settings)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def count_rows(test_session_factory):
    """Count rows of a model in a fresh session (never the identity map)."""

    async def _count(model, *criteria) -> int:
        async with test_session_factory() as session:
            return await session.scalar(
                select(func.count()).select_from(model).where(*criteria),
            )

    return _count
