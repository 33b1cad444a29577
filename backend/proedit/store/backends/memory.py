"""In-memory storage backend."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pydantic import BaseModel

from proedit.store.kinds import EntityKind

from .base import Backend, Transaction

logger = logging.getLogger(__name__)


class MemoryTransaction(Transaction):
    """Write-buffered transaction over the in-memory tables.

    Writes go to an overlay and are applied to the tables in one step on
    commit. If the unit of work raises, the overlay is dropped and the tables
    are left exactly as they were.
    """

    def __init__(self, tables: dict[EntityKind, dict[str, BaseModel]]):
        self._tables = tables
        self._puts: dict[EntityKind, dict[str, BaseModel]] = {kind: {} for kind in EntityKind}
        self._removes: dict[EntityKind, set[str]] = {kind: set() for kind in EntityKind}

    def _lookup(self, kind: EntityKind, entity_id: str) -> Optional[BaseModel]:
        if entity_id in self._removes[kind]:
            return None
        if entity_id in self._puts[kind]:
            return self._puts[kind][entity_id]
        return self._tables[kind].get(entity_id)

    def get(self, kind: EntityKind, entity_id: str) -> Optional[BaseModel]:
        entity = self._lookup(kind, entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    def scan(
        self,
        kind: EntityKind,
        field: Optional[str] = None,
        value: Any = None,
    ) -> list[BaseModel]:
        table = self._tables[kind]
        puts = self._puts[kind]
        removes = self._removes[kind]

        # Stored rows keep their position even when overwritten in the overlay;
        # rows first inserted in this transaction come after them.
        candidates = [
            puts.get(entity_id, entity)
            for entity_id, entity in table.items()
            if entity_id not in removes
        ]
        candidates.extend(entity for entity_id, entity in puts.items() if entity_id not in table)

        return [
            entity.model_copy(deep=True)
            for entity in candidates
            if field is None or getattr(entity, field) == value
        ]

    def insert(self, kind: EntityKind, entity: BaseModel) -> None:
        if self._lookup(kind, entity.id) is not None:
            raise KeyError(f"{kind.value} {entity.id} already exists")
        self._removes[kind].discard(entity.id)
        self._puts[kind][entity.id] = entity.model_copy(deep=True)

    def replace(self, kind: EntityKind, entity: BaseModel) -> None:
        if self._lookup(kind, entity.id) is None:
            raise KeyError(f"{kind.value} {entity.id} does not exist")
        self._puts[kind][entity.id] = entity.model_copy(deep=True)

    def remove(self, kind: EntityKind, entity_id: str) -> bool:
        if self._lookup(kind, entity_id) is None:
            return False
        self._puts[kind].pop(entity_id, None)
        if entity_id in self._tables[kind]:
            self._removes[kind].add(entity_id)
        return True

    def commit(self) -> None:
        """Apply the overlay to the tables."""
        for kind in EntityKind:
            table = self._tables[kind]
            for entity_id in self._removes[kind]:
                table.pop(entity_id, None)
            table.update(self._puts[kind])


class MemoryBackend(Backend):
    """Process-local backend: one dict per entity kind, in insertion order."""

    name = "memory"

    def __init__(self):
        super().__init__()
        self._tables: dict[EntityKind, dict[str, BaseModel]] = {kind: {} for kind in EntityKind}

    @contextmanager
    def _transaction(self) -> Iterator[MemoryTransaction]:
        tx = MemoryTransaction(self._tables)
        yield tx
        tx.commit()

    def count(self, kind: EntityKind) -> int:
        """Number of committed entities of ``kind``."""
        with self._lock:
            return len(self._tables[kind])
