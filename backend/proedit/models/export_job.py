"""
ExportJob table for the SQL entity store.

Tracks export requests and their progress. No rendering happens here.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proedit.core.database import Base


class ExportJobRow(Base):
    """Persisted export job."""

    __tablename__ = "export_jobs"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        doc="UUID primary key"
    )
    seq: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        doc="Insertion sequence"
    )
    project_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
        doc="Parent project id"
    )

    # Status tracking
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        index=True,
        doc="Status: pending, processing, completed, failed"
    )
    progress: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Progress percentage (0-100)"
    )

    # Settings
    resolution: Mapped[str] = mapped_column(String(20), nullable=False)
    format: Mapped[str] = mapped_column(String(10), nullable=False, default="mp4")
    quality: Mapped[str] = mapped_column(String(20), nullable=False, default="high")

    # Output
    output_url: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Result location when complete"
    )
    error: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Error message if job failed"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
        doc="Job creation timestamp"
    )
    completed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True,
        doc="When the job reached completed or failed"
    )

    def __repr__(self) -> str:
        return f"<ExportJobRow(id={self.id!r}, status={self.status!r}, progress={self.progress}%)>"
