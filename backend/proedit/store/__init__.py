"""
Entity repository layer for ProEdit.

    from proedit.store import EntityStore, create_store

    store = create_store()
    project = store.projects.create(ProjectCreate(name="Demo"))
    store.tracks.list_by_parent(project.id)
"""

from .backends import Backend, MemoryBackend, SqlBackend, Transaction
from .cascade import AssetDeletePolicy, CascadeDeleter, CascadeResult
from .entity_store import EntityStore, create_store
from .kinds import EntityKind
from .references import PermissiveReferenceChecker, ReferenceChecker, StoreReferenceChecker

__all__ = [
    "EntityStore",
    "create_store",
    "EntityKind",
    # Backends
    "Backend",
    "Transaction",
    "MemoryBackend",
    "SqlBackend",
    # Integrity
    "AssetDeletePolicy",
    "CascadeDeleter",
    "CascadeResult",
    "ReferenceChecker",
    "PermissiveReferenceChecker",
    "StoreReferenceChecker",
]
