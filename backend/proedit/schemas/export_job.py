"""
Pydantic schemas for export jobs.

An export job only records export metadata and status; nothing is
rendered by this service. completed_at is derived by the store and can
not be supplied by callers.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import BaseModel, Field

from .base import PatchModel

ExportStatus = Literal["pending", "processing", "completed", "failed"]

TERMINAL_STATUSES: FrozenSet[str] = frozenset({"completed", "failed"})


class ExportJobCreate(BaseModel):
    """Schema for recording a new export job."""

    project_id: str = Field(..., description="Project being exported")
    status: ExportStatus = Field(default="pending", description="Job status")
    resolution: str = Field(..., min_length=1, max_length=20, description="Output resolution")
    format: str = Field(default="mp4", max_length=10, description="Container format")
    quality: str = Field(default="high", max_length=20, description="Quality preset")
    output_url: Optional[str] = Field(default=None, description="Result location when complete")
    progress: int = Field(default=0, ge=0, le=100, description="Progress percentage (0-100)")
    error: Optional[str] = Field(default=None, description="Error message if failed")


class ExportJobPatch(PatchModel):
    """Partial export job update."""

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"output_url", "error"})

    project_id: Optional[str] = None
    status: Optional[ExportStatus] = None
    resolution: Optional[str] = Field(default=None, min_length=1, max_length=20)
    format: Optional[str] = Field(default=None, max_length=10)
    quality: Optional[str] = Field(default=None, max_length=20)
    output_url: Optional[str] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    error: Optional[str] = None


class ExportJob(BaseModel):
    """Stored export job."""

    id: str
    project_id: str
    status: ExportStatus
    resolution: str
    format: str
    quality: str
    output_url: Optional[str] = None
    progress: int
    error: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def is_terminal(self) -> bool:
        """Whether the job reached completed or failed."""
        return self.status in TERMINAL_STATUSES
