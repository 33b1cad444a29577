"""
Project table for the SQL entity store.

Central entity that owns assets, tracks and export jobs. Child tables hold
the project id as a plain column; cascades are carried out by the store,
not by the database.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proedit.core.database import Base


class ProjectRow(Base):
    """
    Persisted video editing project.

    updated_at is bumped by the store on every mutation.
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        doc="UUID primary key"
    )
    seq: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        doc="Insertion sequence, used to break ordering ties"
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        doc="Project display name"
    )
    aspect_ratio: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="16:9",
        doc="Aspect ratio, e.g. 16:9"
    )
    resolution: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="1920x1080",
        doc="Output resolution WIDTHxHEIGHT"
    )
    fps: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=30,
        doc="Frames per second"
    )
    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Duration in milliseconds"
    )
    thumbnail_url: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Optional thumbnail URL"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        doc="Project creation timestamp"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
        doc="Last mutation timestamp"
    )

    def __repr__(self) -> str:
        return f"<ProjectRow(id={self.id!r}, name={self.name!r})>"
