"""
Entity repositories.

One repository per entity kind, all sharing the store's backend, clock and
reference checker. Every public method runs in its own store transaction.
A missing entity is reported as None (get/update) or False (delete), never
as an exception.
"""

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel

from proedit.core.clock import generate_uuid
from proedit.core.errors import DanglingReferenceError, InvalidEntityError
from proedit.schemas import (
    Asset,
    AssetCreate,
    AssetPatch,
    Clip,
    ClipCreate,
    ClipPatch,
    ExportJob,
    ExportJobCreate,
    ExportJobPatch,
    Project,
    ProjectCreate,
    ProjectPatch,
    Track,
    TrackCreate,
    TrackPatch,
)
from proedit.schemas.asset import duration_error
from proedit.schemas.base import PatchModel

from .backends.base import Transaction
from .kinds import EntityKind
from .lifecycle import apply_export_patch, initial_completed_at
from .ordering import sort_entities
from .patching import merge_patch

if TYPE_CHECKING:
    from .entity_store import EntityStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)
C = TypeVar("C", bound=BaseModel)
P = TypeVar("P", bound=PatchModel)


class Repository(Generic[E, C, P]):
    """Create/read/update/delete for one entity kind."""

    kind: ClassVar[EntityKind]
    entity_type: ClassVar[type[BaseModel]]
    # (field, kind it points at) pairs checked by the reference checker
    references: ClassVar[tuple[tuple[str, EntityKind], ...]] = ()

    def __init__(self, store: "EntityStore"):
        self._store = store

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def create(self, payload: C) -> E:
        """Store a new entity built from ``payload`` and return it."""
        values = payload.model_dump()
        with self._store.transaction() as tx:
            self._check_references(tx, values)
            entity = self._build(values)
            tx.insert(self.kind, entity)
        logger.debug(f"Created {self.kind.value} {entity.id}")
        return entity

    def get(self, entity_id: str) -> Optional[E]:
        """Fetch one entity, or None if it does not exist."""
        with self._store.transaction() as tx:
            return tx.get(self.kind, entity_id)

    def update(self, entity_id: str, patch: P) -> Optional[E]:
        """
        Merge the supplied fields of ``patch`` into the entity.

        Returns:
            The updated entity, or None if it does not exist
        """
        with self._store.transaction() as tx:
            current = tx.get(self.kind, entity_id)
            if current is None:
                return None
            supplied = {name: getattr(patch, name) for name in patch.supplied_fields()}
            self._check_references(tx, supplied)
            updated = self._apply(current, patch)
            tx.replace(self.kind, updated)
        logger.debug(f"Updated {self.kind.value} {entity_id}: {sorted(supplied)}")
        return updated

    def delete(self, entity_id: str) -> bool:
        """
        Delete an entity (and, for projects and tracks, its dependents).

        Returns:
            True if the entity existed
        """
        with self._store.transaction() as tx:
            existed = self._delete(tx, entity_id)
        if existed:
            logger.debug(f"Deleted {self.kind.value} {entity_id}")
        return existed

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def _build(self, values: dict[str, Any]) -> E:
        return self.entity_type(id=generate_uuid(), **values)

    def _apply(self, current: E, patch: P) -> E:
        return merge_patch(current, patch)

    def _delete(self, tx: Transaction, entity_id: str) -> bool:
        return tx.remove(self.kind, entity_id)

    def _check_references(self, tx: Transaction, values: dict[str, Any]) -> None:
        checker = self._store.reference_checker
        for field, target_kind in self.references:
            ref_id = values.get(field)
            if ref_id is None:
                continue
            if not checker.exists(tx, target_kind, ref_id):
                raise DanglingReferenceError(self.kind.value, field, ref_id)


class ChildRepository(Repository[E, C, P]):
    """Repository for entities listed under a parent entity."""

    parent_field: ClassVar[str]

    def list_by_parent(self, parent_id: str) -> list[E]:
        """All entities whose parent id is ``parent_id``, in listing order."""
        with self._store.transaction() as tx:
            entities = tx.scan(self.kind, self.parent_field, parent_id)
        return sort_entities(self.kind, entities)


class ProjectRepository(Repository[Project, ProjectCreate, ProjectPatch]):
    kind = EntityKind.PROJECT
    entity_type = Project

    def list_all(self) -> list[Project]:
        """Every project, most recently updated first."""
        with self._store.transaction() as tx:
            projects = tx.scan(self.kind)
        return sort_entities(self.kind, projects)

    def _build(self, values: dict[str, Any]) -> Project:
        now = self._store.clock.now()
        return Project(id=generate_uuid(), created_at=now, updated_at=now, **values)

    def _apply(self, current: Project, patch: ProjectPatch) -> Project:
        updated = merge_patch(current, patch)
        # Any update counts as a touch, even an empty one.
        updated.updated_at = self._store.clock.now()
        return updated

    def _delete(self, tx: Transaction, entity_id: str) -> bool:
        return self._store.cascade.delete_project(tx, entity_id).existed


class AssetRepository(ChildRepository[Asset, AssetCreate, AssetPatch]):
    kind = EntityKind.ASSET
    entity_type = Asset
    parent_field = "project_id"
    references = (("project_id", EntityKind.PROJECT),)

    def _build(self, values: dict[str, Any]) -> Asset:
        return Asset(id=generate_uuid(), created_at=self._store.clock.now(), **values)

    def _apply(self, current: Asset, patch: AssetPatch) -> Asset:
        updated = merge_patch(current, patch)
        error = duration_error(updated.type, updated.duration)
        if error:
            raise InvalidEntityError(self.kind.value, "duration", error)
        return updated

    def _delete(self, tx: Transaction, entity_id: str) -> bool:
        return self._store.cascade.delete_asset(tx, entity_id).existed


class TrackRepository(ChildRepository[Track, TrackCreate, TrackPatch]):
    kind = EntityKind.TRACK
    entity_type = Track
    parent_field = "project_id"
    references = (("project_id", EntityKind.PROJECT),)

    def _delete(self, tx: Transaction, entity_id: str) -> bool:
        return self._store.cascade.delete_track(tx, entity_id).existed


class ClipRepository(ChildRepository[Clip, ClipCreate, ClipPatch]):
    kind = EntityKind.CLIP
    entity_type = Clip
    parent_field = "track_id"
    references = (
        ("track_id", EntityKind.TRACK),
        ("asset_id", EntityKind.ASSET),
    )


class ExportJobRepository(ChildRepository[ExportJob, ExportJobCreate, ExportJobPatch]):
    kind = EntityKind.EXPORT_JOB
    entity_type = ExportJob
    parent_field = "project_id"
    references = (("project_id", EntityKind.PROJECT),)

    def _build(self, values: dict[str, Any]) -> ExportJob:
        now = self._store.clock.now()
        return ExportJob(
            id=generate_uuid(),
            created_at=now,
            completed_at=initial_completed_at(values["status"], now),
            **values,
        )

    def _apply(self, current: ExportJob, patch: ExportJobPatch) -> ExportJob:
        return apply_export_patch(
            current,
            patch,
            now=self._store.clock.now(),
            strict=self._store.strict_export_transitions,
        )
