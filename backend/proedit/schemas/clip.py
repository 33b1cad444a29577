"""
Pydantic schemas for clips.

A clip places (part of) an asset, or a piece of text, on a track.
All times are milliseconds.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import BaseModel, Field

from .base import PatchModel


class ClipCreate(BaseModel):
    """Schema for placing a clip on a track."""

    track_id: str = Field(..., description="Owning track id")
    asset_id: Optional[str] = Field(
        default=None,
        description="Source asset id (null for text clips)"
    )
    start_time: int = Field(..., ge=0, description="Position on the timeline")
    duration: int = Field(..., gt=0, description="Clip duration")
    trim_start: int = Field(default=0, ge=0, description="Offset into the source asset")
    volume: int = Field(default=100, ge=0, le=100, description="Volume (0-100)")
    opacity: int = Field(default=100, ge=0, le=100, description="Opacity (0-100)")
    filters: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Applied filters as a JSON object"
    )
    text_content: Optional[str] = Field(default=None, description="Text for text clips")
    text_style: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Text styling as a JSON object"
    )


class ClipPatch(PatchModel):
    """Partial clip update."""

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"asset_id", "filters", "text_content", "text_style"}
    )

    track_id: Optional[str] = None
    asset_id: Optional[str] = None
    start_time: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, gt=0)
    trim_start: Optional[int] = Field(default=None, ge=0)
    volume: Optional[int] = Field(default=None, ge=0, le=100)
    opacity: Optional[int] = Field(default=None, ge=0, le=100)
    filters: Optional[Dict[str, Any]] = None
    text_content: Optional[str] = None
    text_style: Optional[Dict[str, Any]] = None


class Clip(BaseModel):
    """Stored clip."""

    id: str
    track_id: str
    asset_id: Optional[str] = None
    start_time: int
    duration: int
    trim_start: int
    volume: int
    opacity: int
    filters: Optional[Dict[str, Any]] = None
    text_content: Optional[str] = None
    text_style: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True
