"""
The entity store: five repositories over one backend.

Build one with ``create_store(settings)`` (or construct EntityStore directly
in tests) and hand it to whatever needs it; there is no module-level store.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from proedit.core.clock import Clock
from proedit.core.config import Settings, get_settings

from .backends import Backend, MemoryBackend, SqlBackend, Transaction
from .cascade import AssetDeletePolicy, CascadeDeleter
from .references import PermissiveReferenceChecker, ReferenceChecker, StoreReferenceChecker
from .repositories import (
    AssetRepository,
    ClipRepository,
    ExportJobRepository,
    ProjectRepository,
    TrackRepository,
)

logger = logging.getLogger(__name__)


class EntityStore:
    """
    Repository layer for projects, assets, tracks, clips and export jobs.

    Attributes:
        projects, assets, tracks, clips, exports: Per-kind repositories
        clock: Timestamp source for created_at/updated_at/completed_at
        reference_checker: Consulted before creates/updates that set a foreign key
        cascade: Cascading delete orchestrator
    """

    def __init__(
        self,
        backend: Optional[Backend] = None,
        clock: Optional[Clock] = None,
        reference_checker: Optional[ReferenceChecker] = None,
        asset_delete_policy: AssetDeletePolicy = AssetDeletePolicy.KEEP,
        strict_export_transitions: bool = False,
    ):
        self.backend = backend or MemoryBackend()
        self.clock = clock or Clock()
        self.reference_checker = reference_checker or PermissiveReferenceChecker()
        self.cascade = CascadeDeleter(asset_delete_policy)
        self.strict_export_transitions = strict_export_transitions

        self.projects = ProjectRepository(self)
        self.assets = AssetRepository(self)
        self.tracks = TrackRepository(self)
        self.clips = ClipRepository(self)
        self.exports = ExportJobRepository(self)

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """One atomic unit of work under the store lock."""
        with self.backend.transaction() as tx:
            yield tx

    def close(self) -> None:
        self.backend.close()


def create_store(settings: Optional[Settings] = None) -> EntityStore:
    """Build an EntityStore configured from ``settings``."""
    settings = settings or get_settings()

    if settings.storage_backend == "sql":
        backend: Backend = SqlBackend.from_url(settings.database_url, echo=settings.sql_echo)
    else:
        backend = MemoryBackend()

    checker: ReferenceChecker = (
        StoreReferenceChecker() if settings.enforce_references else PermissiveReferenceChecker()
    )

    logger.info(
        f"Entity store ready (backend={backend.name}, "
        f"enforce_references={settings.enforce_references}, "
        f"asset_delete_policy={settings.asset_delete_policy})"
    )

    return EntityStore(
        backend=backend,
        reference_checker=checker,
        asset_delete_policy=AssetDeletePolicy(settings.asset_delete_policy),
        strict_export_transitions=settings.strict_export_transitions,
    )
