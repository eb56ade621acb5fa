"""Artist ORM model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from music_manager.database import Base

if TYPE_CHECKING:
    from music_manager.models.album import Album


class Artist(Base):
    """A recording artist or band."""

    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50), index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime | None] = mapped_column(nullable=True)

    # Relationships
    albums: Mapped[list[Album]] = relationship(
        back_populates="artist", cascade="all, delete-orphan", passive_deletes=True
    )
