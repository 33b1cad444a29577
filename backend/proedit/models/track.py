"""
Track table for the SQL entity store.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from proedit.core.database import Base


class TrackRow(Base):
    """Persisted timeline track."""

    __tablename__ = "tracks"

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
    type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        doc="Track type: video, audio, text"
    )
    order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Stacking rank on the timeline"
    )
    locked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        doc="Whether edits are locked"
    )
    muted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        doc="Whether the track is muted"
    )

    def __repr__(self) -> str:
        return f"<TrackRow(id={self.id!r}, type={self.type!r}, order={self.order})>"
