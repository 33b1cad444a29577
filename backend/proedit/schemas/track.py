"""
Pydantic schemas for timeline tracks.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .base import PatchModel

TrackType = Literal["video", "audio", "text"]


class TrackCreate(BaseModel):
    """Schema for adding a track to a project."""

    project_id: str = Field(..., description="Owning project id")
    type: TrackType = Field(..., description="Track type: video, audio or text")
    order: int = Field(
        ...,
        description="Stacking rank on the timeline (not unique)"
    )
    locked: bool = Field(default=False, description="Whether the track is locked")
    muted: bool = Field(default=False, description="Whether the track is muted")


class TrackPatch(PatchModel):
    """Partial track update."""

    project_id: Optional[str] = None
    type: Optional[TrackType] = None
    order: Optional[int] = None
    locked: Optional[bool] = None
    muted: Optional[bool] = None


class Track(BaseModel):
    """Stored track."""

    id: str
    project_id: str
    type: TrackType
    order: int
    locked: bool
    muted: bool

    class Config:
        from_attributes = True
