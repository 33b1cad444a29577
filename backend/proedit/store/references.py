"""
Foreign key checks for creates and updates.

The store never inspects parent ids on its own; it asks a ReferenceChecker.
The permissive checker keeps the historical behaviour of accepting any id.
"""

from typing import Protocol

from .backends.base import Transaction
from .kinds import EntityKind


class ReferenceChecker(Protocol):
    """Decides whether an id used as a foreign key is acceptable."""

    def exists(self, tx: Transaction, kind: EntityKind, entity_id: str) -> bool:
        ...


class PermissiveReferenceChecker:
    """Accepts every reference, including ids that do not exist."""

    def exists(self, tx: Transaction, kind: EntityKind, entity_id: str) -> bool:
        return True


class StoreReferenceChecker:
    """Accepts a reference only if the target entity is in the store."""

    def exists(self, tx: Transaction, kind: EntityKind, entity_id: str) -> bool:
        return tx.get(kind, entity_id) is not None
