"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - A TransactionScope is owned by exactly one coordinator invocation;
      it is never shared between concurrent callers
"""

from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import Any, Protocol, TypeVar


T = TypeVar("T")


class Clock(Protocol):
    """Source of the current instant. Always timezone-aware."""
    def now(self) -> datetime: ...


class TransactionScope(Protocol):
    """One unit of storage work — commits or rolls back as a whole."""
    async def get(
        self, model: type[T], entity_id: Any, load: tuple = (),
    ) -> T | None: ...
    async def create(self, entity: Any) -> None: ...
    async def delete_where(self, model: type, *criteria: Any) -> int: ...
    async def save(self, entity: Any) -> None: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class StorageHandle(Protocol):
    """Hands out transaction scopes — implemented by the database manager."""
    def begin(self) -> AbstractAsyncContextManager[TransactionScope]: ...
