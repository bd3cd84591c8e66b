"""Database Session Manager — async engine, sessions, and transaction scopes.

Invariants:
    - A session that raises is rolled back before it is closed
    - begin() scopes roll back on ANY failure, including task cancellation
    - SQLAlchemy exceptions leave this module only as DatabaseError
    - pool_pre_ping guards against stale pooled connections

Design Decisions:
    - One db_manager per process, created in the FastAPI lifespan, so importing
      this module never opens a connection
    - expire_on_commit=False: committed objects stay readable after the
      session closes (responses are serialized outside it)
    - The cancellation rollback is shielded so an aborted request still
      releases its transaction
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ordering_api.infrastructure.transaction_scope import (
    SqlTransactionScope, map_storage_error,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine; hands out sessions (reads) and transaction scopes (writes)."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        # SQLite pools do not accept sizing arguments
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(
                    f"Session aborted by {type(e).__name__}: {e}",
                    extra={"operation": "session"},
                )
                raise map_storage_error(e, "session") from e

    @asynccontextmanager
    async def begin(self) -> AsyncGenerator[SqlTransactionScope, None]:
        """Transaction scope for one unit of work. Anything short of commit() is undone."""
        async with self.session() as db:
            scope = SqlTransactionScope(db)
            try:
                yield scope
            except asyncio.CancelledError:
                await asyncio.shield(scope.rollback())
                raise
            except Exception:
                await scope.rollback()
                raise

    async def health_check(self) -> bool:
        """True when a trivial query succeeds (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db() during application startup
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def _require_manager() -> DatabaseSessionManager:
    if db_manager is None:
        raise RuntimeError("Database not initialized; call init_db() first")
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    async with _require_manager().session() as session:
        yield session


def get_storage() -> DatabaseSessionManager:
    """FastAPI dependency: the StorageHandle for coordinator writes."""
    return _require_manager()
