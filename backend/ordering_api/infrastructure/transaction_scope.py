"""SQL Transaction Scope — TransactionScope protocol implemented over one AsyncSession.

Invariants:
    - One scope wraps exactly one AsyncSession; never shared across callers
    - Every statement flushes immediately so constraint violations surface at
      the step that caused them, not at commit
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - rollback() after a failed commit is safe and never raises

Design Decisions:
    - Bulk DELETE with synchronize_session=False: composite collections are
      never loaded inside a coordinator transaction (lazy="raise"), so there is
      no in-session state to synchronize
    - get() uses populate_existing so a re-read never returns stale identity-map state
"""

import logging
from typing import Any, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def map_storage_error(e: SQLAlchemyError, operation: str) -> DatabaseError:
    """Translate a SQLAlchemy exception into the opaque storage failure."""
    if isinstance(e, IntegrityError):
        return DatabaseError("Integrity constraint violated", operation)
    if isinstance(e, OperationalError):
        return DatabaseError("Connection or operational error", operation)
    return DatabaseError("Database operation failed", operation)


class SqlTransactionScope:
    """Transaction scope backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get(
        self, model: type[T], entity_id: Any, load: tuple = (),
    ) -> T | None:
        """Fetch one row by primary key, applying explicit loader options."""
        query = (
            select(model)
            .where(model.id == entity_id)
            .options(*load)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"DB read failed for {model.__name__}: {e}")
            raise map_storage_error(e, "read") from e
        return result.scalar_one_or_none()

    async def create(self, entity: Any) -> None:
        self._db.add(entity)
        await self._flush("insert")

    async def save(self, entity: Any) -> None:
        self._db.add(entity)
        await self._flush("update")

    async def delete_where(self, model: type, *criteria: Any) -> int:
        """Delete every row of model matching criteria. Returns rows affected."""
        statement = (
            delete(model)
            .where(*criteria)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._db.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"DB delete failed for {model.__name__}: {e}")
            raise map_storage_error(e, "delete") from e
        return result.rowcount

    async def commit(self) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            logger.error(f"DB commit failed: {e}")
            raise map_storage_error(e, "commit") from e

    async def rollback(self) -> None:
        try:
            await self._db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"DB rollback failed: {e}")

    async def _flush(self, operation: str) -> None:
        try:
            await self._db.flush()
        except SQLAlchemyError as e:
            logger.error(f"DB {operation} failed: {e}")
            raise map_storage_error(e, operation) from e
