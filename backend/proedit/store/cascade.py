"""
Cascading deletes.

Children are always removed before their parent:

    project: assets, then tracks (each track's clips first), then export jobs
    track:   clips

Removing a child that is already gone is a no-op, so re-running a cascade
for the same root is safe. The caller runs the cascade inside one store
transaction; nothing is visible until it commits.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from .backends.base import Transaction
from .kinds import EntityKind

logger = logging.getLogger(__name__)


class AssetDeletePolicy(str, Enum):
    """What deleting an asset does to clips that use it."""

    # Clips keep the stale asset_id (historical behaviour)
    KEEP = "keep"
    # Clips stay on the timeline with asset_id set to None
    DETACH = "detach"


@dataclass
class CascadeResult:
    """Summary of one delete and everything it took with it."""

    kind: EntityKind
    entity_id: str
    existed: bool = False
    removed: Counter = field(default_factory=Counter)
    dangling_clips: int = 0
    detached_clips: int = 0

    def __str__(self) -> str:
        parts = ", ".join(f"{count} {kind.value}" for kind, count in self.removed.items() if count)
        return f"{self.kind.value} {self.entity_id}: removed [{parts or 'nothing'}]"


class CascadeDeleter:
    """Deletes an entity together with its dependents."""

    def __init__(self, asset_delete_policy: AssetDeletePolicy = AssetDeletePolicy.KEEP):
        self.asset_delete_policy = AssetDeletePolicy(asset_delete_policy)

    def delete_project(self, tx: Transaction, project_id: str) -> CascadeResult:
        result = CascadeResult(EntityKind.PROJECT, project_id)

        for asset in tx.scan(EntityKind.ASSET, "project_id", project_id):
            self._remove_asset(tx, asset.id, result)

        for track in tx.scan(EntityKind.TRACK, "project_id", project_id):
            self._remove_track(tx, track.id, result)

        for job in tx.scan(EntityKind.EXPORT_JOB, "project_id", project_id):
            self._remove(tx, EntityKind.EXPORT_JOB, job.id, result)

        result.existed = tx.remove(EntityKind.PROJECT, project_id)
        if result.existed:
            result.removed[EntityKind.PROJECT] += 1
        logger.info(f"Cascade delete {result}")
        return result

    def delete_track(self, tx: Transaction, track_id: str) -> CascadeResult:
        result = CascadeResult(EntityKind.TRACK, track_id)
        result.existed = self._remove_track(tx, track_id, result)
        logger.info(f"Cascade delete {result}")
        return result

    def delete_asset(self, tx: Transaction, asset_id: str) -> CascadeResult:
        result = CascadeResult(EntityKind.ASSET, asset_id)
        result.existed = self._remove_asset(tx, asset_id, result)
        if result.dangling_clips:
            logger.warning(
                f"Deleted asset {asset_id} is still referenced by {result.dangling_clips} clip(s)"
            )
        return result

    def _remove(self, tx: Transaction, kind: EntityKind, entity_id: str, result: CascadeResult) -> bool:
        removed = tx.remove(kind, entity_id)
        if removed:
            result.removed[kind] += 1
        return removed

    def _remove_track(self, tx: Transaction, track_id: str, result: CascadeResult) -> bool:
        for clip in tx.scan(EntityKind.CLIP, "track_id", track_id):
            self._remove(tx, EntityKind.CLIP, clip.id, result)
        return self._remove(tx, EntityKind.TRACK, track_id, result)

    def _remove_asset(self, tx: Transaction, asset_id: str, result: CascadeResult) -> bool:
        removed = self._remove(tx, EntityKind.ASSET, asset_id, result)
        if not removed:
            return False

        users = tx.scan(EntityKind.CLIP, "asset_id", asset_id)
        if self.asset_delete_policy is AssetDeletePolicy.DETACH:
            for clip in users:
                clip.asset_id = None
                tx.replace(EntityKind.CLIP, clip)
            result.detached_clips += len(users)
        else:
            result.dangling_clips += len(users)
        return True
