"""Album and album-genre association ORM models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from music_manager.database import Base

if TYPE_CHECKING:
    from music_manager.models.artist import Artist
    from music_manager.models.genre import Genre
    from music_manager.models.track import Track


class Album(Base):
    """An album released by a single artist."""

    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(50), index=True)
    release_year: Mapped[int] = mapped_column()
    artist_id: Mapped[int] = mapped_column(ForeignKey("artists.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime | None] = mapped_column(nullable=True)

    # Relationships
    artist: Mapped[Artist] = relationship(back_populates="albums")
    tracks: Mapped[list[Track]] = relationship(
        back_populates="album", cascade="all, delete-orphan", passive_deletes=True
    )
    album_genres: Mapped[list[AlbumGenre]] = relationship(
        back_populates="album", cascade="all, delete-orphan", passive_deletes=True
    )


class AlbumGenre(Base):
    """Association between an album and a genre."""

    __tablename__ = "album_genres"

    album_id: Mapped[int] = mapped_column(
        ForeignKey("albums.id", ondelete="CASCADE"), primary_key=True
    )
    genre_id: Mapped[int] = mapped_column(
        ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Relationships
    album: Mapped[Album] = relationship(back_populates="album_genres")
    genre: Mapped[Genre] = relationship(back_populates="album_genres")
