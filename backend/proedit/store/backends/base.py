"""Abstract storage backend for the entity store."""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pydantic import BaseModel

from proedit.store.kinds import EntityKind


class Transaction(ABC):
    """One unit of work against the five entity tables.

    Everything done through a transaction becomes visible to other callers
    at once when the transaction commits, or not at all. Entities handed in
    and out are copies: mutating them never touches stored state.
    """

    @abstractmethod
    def get(self, kind: EntityKind, entity_id: str) -> Optional[BaseModel]:
        """Fetch one entity.

        Returns:
            The entity, or None if no entity of that kind has the id
        """
        pass

    @abstractmethod
    def scan(
        self,
        kind: EntityKind,
        field: Optional[str] = None,
        value: Any = None,
    ) -> list[BaseModel]:
        """List entities in insertion order.

        Args:
            kind: Collection to read
            field: Attribute to filter on, or None for the whole collection
            value: Required value of ``field``

        Returns:
            Matching entities, oldest insert first
        """
        pass

    @abstractmethod
    def insert(self, kind: EntityKind, entity: BaseModel) -> None:
        """Add a new entity. Its id must not be in use."""
        pass

    @abstractmethod
    def replace(self, kind: EntityKind, entity: BaseModel) -> None:
        """Overwrite an existing entity, keeping its insertion position."""
        pass

    @abstractmethod
    def remove(self, kind: EntityKind, entity_id: str) -> bool:
        """Remove an entity.

        Returns:
            True if the entity existed, False if it was already absent
        """
        pass


class Backend(ABC):
    """Storage backend.

    A single re-entrant lock serializes every transaction, reads included,
    so a reader never sees another caller's half-applied cascade.
    """

    name: str = "abstract"

    def __init__(self):
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Open a transaction under the store lock.

        Commits when the block exits normally, discards all writes when it
        raises.
        """
        with self._lock:
            with self._transaction() as tx:
                yield tx

    @abstractmethod
    def _transaction(self):
        """Backend-specific transaction context manager."""
        pass

    def check_health(self) -> None:
        """Raise StorageError if the backend is unusable."""
        pass

    def close(self) -> None:
        """Release backend resources."""
        pass
