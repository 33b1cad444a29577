"""
Pydantic schemas for projects.

A project is the root of the hierarchy: assets, tracks and export jobs
hang off it, clips hang off tracks.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from .base import PatchModel


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Project display name"
    )
    aspect_ratio: str = Field(
        default="16:9",
        max_length=20,
        description="Aspect ratio, e.g. '16:9' or '9:16'"
    )
    resolution: str = Field(
        default="1920x1080",
        max_length=20,
        description="Output resolution as WIDTHxHEIGHT"
    )
    fps: int = Field(
        default=30,
        ge=1,
        le=240,
        description="Frames per second"
    )
    duration: int = Field(
        default=0,
        ge=0,
        description="Project duration in milliseconds"
    )
    thumbnail_url: Optional[str] = Field(
        default=None,
        description="Optional thumbnail URL"
    )


class ProjectPatch(PatchModel):
    """Partial project update."""

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"thumbnail_url"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    aspect_ratio: Optional[str] = Field(default=None, max_length=20)
    resolution: Optional[str] = Field(default=None, max_length=20)
    fps: Optional[int] = Field(default=None, ge=1, le=240)
    duration: Optional[int] = Field(default=None, ge=0)
    thumbnail_url: Optional[str] = None


class Project(BaseModel):
    """Stored project."""

    id: str
    name: str
    aspect_ratio: str
    resolution: str
    fps: int
    duration: int
    thumbnail_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
