"""Composite Write Coordinator — all-or-nothing writes of a parent plus its dependents.

Invariants:
    - Every operation runs inside ONE transaction scope owned by that invocation
    - replace_dependents: old dependents deleted, new ones re-keyed to the parent
      and inserted, parent fields saved, then commit; any failure rolls back
      everything, so (old parent, old dependents) -> (new parent, new dependents)
      is the only visible transition
    - cascade_delete: dependents deleted (deepest level first), then the parent;
      zero parent rows affected -> rollback + ResourceNotFoundError, so a
      dependents-only delete never commits
    - Results are re-read in a fresh scope after commit, with dependents eagerly
      loaded; callers see exactly what was committed
    - No retries: writes here are not idempotent

Design Decisions:
    - Composite/DependentLink describe the aggregate declaratively, so menu
      items (one level) and orders (two levels) share one code path
    - Logger injected by the application, not looked up at import time
    - Rollback is owned by StorageHandle.begin(): raising inside the scope is
      the only abort mechanism the coordinator needs
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, inspect, select
from sqlalchemy.orm import selectinload

from ordering_api.core.errors import ResourceNotFoundError
from ordering_api.core.repository_protocols import StorageHandle, TransactionScope


@dataclass(frozen=True)
class DependentLink:
    """One level of dependents: rows of model whose foreign_key points at the owner."""
    model: type
    foreign_key: str
    relationship: str
    children: tuple["DependentLink", ...] = ()


@dataclass(frozen=True)
class Composite:
    """A parent model together with the dependent collection it owns."""
    name: str
    parent: type
    dependent: DependentLink

    def load_options(self) -> tuple:
        """Loader options that eagerly fetch the whole dependent tree."""
        return tuple(_loaders(self.parent, (self.dependent,), None))


def _loaders(owner: type, links: Sequence[DependentLink], base) -> list:
    options = []
    for link in links:
        attribute = getattr(owner, link.relationship)
        loader = selectinload(attribute) if base is None else base.selectinload(attribute)
        if link.children:
            options.extend(_loaders(link.model, link.children, loader))
        else:
            options.append(loader)
    return options


class CompositeWriteCoordinator:
    """Runs composite writes against a StorageHandle, one transaction per call."""

    def __init__(self, storage: StorageHandle, logger: logging.Logger):
        self._storage = storage
        self._logger = logger

    async def create(self, composite: Composite, parent: Any) -> Any:
        """Insert parent with its (already attached) dependents; return the re-read."""
        async with self._storage.begin() as tx:
            await tx.create(parent)
            parent_id = parent.id
            await tx.commit()
        self._logger.info(
            f"Created {composite.name} {parent_id}",
            extra={"composite": composite.name, "parent_id": parent_id},
        )
        return await self._reload(composite, parent_id)

    async def replace_dependents(
        self,
        composite: Composite,
        parent_id: int,
        fields: Mapping[str, Any],
        dependents: Sequence[Any],
    ) -> Any:
        """Replace parent fields and its full dependent collection atomically."""
        _check_fields(composite.parent, fields)
        link = composite.dependent
        try:
            async with self._storage.begin() as tx:
                parent = await tx.get(composite.parent, parent_id)
                if parent is None:
                    raise ResourceNotFoundError(composite.name, str(parent_id))
                removed = await _delete_dependents(tx, (link,), parent_id)
                for row in dependents:
                    setattr(row, link.foreign_key, parent_id)
                    await tx.create(row)
                for key, value in fields.items():
                    setattr(parent, key, value)
                await tx.save(parent)
                await tx.commit()
        except Exception as e:
            self._logger.warning(
                f"Replace of {composite.name} {parent_id} dependents rolled back: {e}",
                extra={"composite": composite.name, "parent_id": parent_id},
            )
            raise
        self._logger.info(
            f"Replaced {removed} -> {len(dependents)} dependents of {composite.name} {parent_id}",
            extra={
                "composite": composite.name, "parent_id": parent_id,
                "dependent_count": len(dependents),
            },
        )
        return await self._reload(composite, parent_id)

    async def cascade_delete(self, composite: Composite, parent_id: int) -> None:
        """Delete parent and all dependents, or nothing at all."""
        try:
            async with self._storage.begin() as tx:
                removed = await _delete_dependents(tx, (composite.dependent,), parent_id)
                deleted = await tx.delete_where(
                    composite.parent, composite.parent.id == parent_id,
                )
                if deleted == 0:
                    raise ResourceNotFoundError(composite.name, str(parent_id))
                await tx.commit()
        except Exception as e:
            self._logger.warning(
                f"Delete of {composite.name} {parent_id} rolled back: {e}",
                extra={"composite": composite.name, "parent_id": parent_id},
            )
            raise
        self._logger.info(
            f"Deleted {composite.name} {parent_id} with {removed} dependents",
            extra={
                "composite": composite.name, "parent_id": parent_id,
                "dependent_count": removed,
            },
        )

    async def _reload(self, composite: Composite, parent_id: int) -> Any:
        async with self._storage.begin() as tx:
            parent = await tx.get(
                composite.parent, parent_id, load=composite.load_options(),
            )
        if parent is None:
            raise ResourceNotFoundError(composite.name, str(parent_id))
        return parent


async def _delete_dependents(
    tx: TransactionScope, links: Sequence[DependentLink], owners: int | Select,
) -> int:
    """Delete dependents of owners (an id or a subquery of ids), deepest first.

    Returns the number of first-level rows removed.
    """
    removed = 0
    for link in links:
        foreign_key = getattr(link.model, link.foreign_key)
        scope = foreign_key.in_(owners) if isinstance(owners, Select) else foreign_key == owners
        if link.children:
            await _delete_dependents(
                tx, link.children, select(link.model.id).where(scope),
            )
        removed += await tx.delete_where(link.model, scope)
    return removed


def _check_fields(model: type, fields: Mapping[str, Any]) -> None:
    columns = inspect(model).columns.keys()
    unknown = [key for key in fields if key not in columns or key == "id"]
    if unknown:
        raise ValueError(f"Not writable on {model.__name__}: {', '.join(unknown)}")
