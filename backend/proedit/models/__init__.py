"""
SQLAlchemy tables for the SQL entity store.

This module exports all table models for convenient importing:

    from proedit.models import ProjectRow, AssetRow, TrackRow, ClipRow, ExportJobRow

All tables use UUID strings as primary keys and carry an integer ``seq``
column recording insertion order.
"""

from .project import ProjectRow
from .asset import AssetRow
from .track import TrackRow
from .clip import ClipRow
from .export_job import ExportJobRow

__all__ = [
    "ProjectRow",
    "AssetRow",
    "TrackRow",
    "ClipRow",
    "ExportJobRow",
]
