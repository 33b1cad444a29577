"""
Clip table for the SQL entity store.
"""

from typing import Any, Dict, Optional

from sqlalchemy import Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from proedit.core.database import Base


class ClipRow(Base):
    """
    Persisted clip.

    asset_id is not constrained: deleting an asset may leave clips
    pointing at it, depending on the store's asset delete policy.
    """

    __tablename__ = "clips"

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
    track_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
        doc="Parent track id"
    )
    asset_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        nullable=True,
        index=True,
        doc="Source asset id (null for text clips)"
    )

    # Timing (milliseconds)
    start_time: Mapped[int] = mapped_column(Integer, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    trim_start: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Mix
    volume: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    opacity: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    filters: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    # Text clips
    text_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    text_style: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<ClipRow(id={self.id!r}, track_id={self.track_id!r}, start={self.start_time})>"
