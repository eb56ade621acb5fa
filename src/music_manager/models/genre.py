"""Genre ORM model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from music_manager.database import Base

if TYPE_CHECKING:
    from music_manager.models.album import AlbumGenre


class Genre(Base):
    """A musical genre shared across albums."""

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(20), index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime | None] = mapped_column(nullable=True)

    # Relationships
    album_genres: Mapped[list[AlbumGenre]] = relationship(
        back_populates="genre", cascade="all, delete-orphan", passive_deletes=True
    )
