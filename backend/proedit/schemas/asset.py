"""
Pydantic schemas for media assets.

Assets describe uploaded files. They belong to a project and may be
referenced by clips.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .base import PatchModel

AssetType = Literal["video", "audio", "image"]


def duration_error(asset_type: str, duration: Optional[int]) -> Optional[str]:
    """Why ``duration`` is invalid for ``asset_type``, or None if it is fine."""
    if duration is None and asset_type != "image":
        return f"duration is required for {asset_type} assets"
    return None


class AssetCreate(BaseModel):
    """Schema for registering an asset."""

    project_id: str = Field(..., description="Owning project id")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    type: AssetType = Field(..., description="Media type: video, audio or image")
    url: str = Field(..., min_length=1, description="Location of the media file")
    duration: Optional[int] = Field(
        default=None,
        ge=0,
        description="Duration in milliseconds (null only for images)"
    )
    thumbnail_url: Optional[str] = None
    waveform_data: Optional[List[float]] = Field(
        default=None,
        description="Peak samples for audio waveform display"
    )
    file_size: Optional[int] = Field(default=None, ge=0, description="Size in bytes")

    @model_validator(mode="after")
    def check_duration(self) -> "AssetCreate":
        error = duration_error(self.type, self.duration)
        if error:
            raise ValueError(error)
        return self


class AssetPatch(PatchModel):
    """Partial asset update."""

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"duration", "thumbnail_url", "waveform_data", "file_size"}
    )

    project_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[AssetType] = None
    url: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[int] = Field(default=None, ge=0)
    thumbnail_url: Optional[str] = None
    waveform_data: Optional[List[float]] = None
    file_size: Optional[int] = Field(default=None, ge=0)


class Asset(BaseModel):
    """Stored asset."""

    id: str
    project_id: str
    name: str
    type: AssetType
    url: str
    duration: Optional[int] = None
    thumbnail_url: Optional[str] = None
    waveform_data: Optional[List[float]] = None
    file_size: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True
