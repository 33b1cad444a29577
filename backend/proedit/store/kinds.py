"""
Entity kinds known to the store and the schema class stored for each.
"""

from enum import Enum

from pydantic import BaseModel

from proedit.schemas import Asset, Clip, ExportJob, Project, Track


class EntityKind(str, Enum):
    """The five entity collections."""

    PROJECT = "project"
    ASSET = "asset"
    TRACK = "track"
    CLIP = "clip"
    EXPORT_JOB = "export_job"


ENTITY_TYPES: dict[EntityKind, type[BaseModel]] = {
    EntityKind.PROJECT: Project,
    EntityKind.ASSET: Asset,
    EntityKind.TRACK: Track,
    EntityKind.CLIP: Clip,
    EntityKind.EXPORT_JOB: ExportJob,
}
