"""
Asset table for the SQL entity store.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import BigInteger, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proedit.core.database import Base


class AssetRow(Base):
    """Persisted media asset (video, audio or image)."""

    __tablename__ = "assets"

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
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Display name"
    )
    type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        doc="Media type: video, audio, image"
    )
    url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Media file location"
    )
    duration: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="Duration in milliseconds (null for images)"
    )
    thumbnail_url: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Thumbnail URL"
    )
    waveform_data: Mapped[Optional[List[float]]] = mapped_column(
        JSON,
        nullable=True,
        doc="Waveform peaks for audio display"
    )
    file_size: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        doc="File size in bytes"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        doc="Registration timestamp"
    )

    def __repr__(self) -> str:
        return f"<AssetRow(id={self.id!r}, type={self.type!r}, name={self.name!r})>"
