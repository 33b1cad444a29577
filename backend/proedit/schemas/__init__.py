"""
Pydantic schemas for ProEdit entities.

Each entity has three shapes: ``XCreate`` (insert payload), ``XPatch``
(partial update) and ``X`` (the stored entity).
"""

from .base import PatchModel
from .project import Project, ProjectCreate, ProjectPatch
from .asset import Asset, AssetCreate, AssetPatch, AssetType
from .track import Track, TrackCreate, TrackPatch, TrackType
from .clip import Clip, ClipCreate, ClipPatch
from .export_job import (
    ExportJob,
    ExportJobCreate,
    ExportJobPatch,
    ExportStatus,
    TERMINAL_STATUSES,
)

__all__ = [
    "PatchModel",
    # Project
    "Project",
    "ProjectCreate",
    "ProjectPatch",
    # Asset
    "Asset",
    "AssetCreate",
    "AssetPatch",
    "AssetType",
    # Track
    "Track",
    "TrackCreate",
    "TrackPatch",
    "TrackType",
    # Clip
    "Clip",
    "ClipCreate",
    "ClipPatch",
    # Export
    "ExportJob",
    "ExportJobCreate",
    "ExportJobPatch",
    "ExportStatus",
    "TERMINAL_STATUSES",
]
