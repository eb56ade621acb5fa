"""Write service accepting edit projections for create, update and delete."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from music_manager.database import get_db
from music_manager.models.album import Album, AlbumGenre
from music_manager.models.artist import Artist
from music_manager.models.genre import Genre
from music_manager.models.track import Track
from music_manager.schemas.album import AlbumEdit
from music_manager.schemas.artist import ArtistEdit
from music_manager.schemas.genre import GenreEdit
from music_manager.schemas.track import TrackEdit
from music_manager.services.base import BaseService

logger = logging.getLogger(__name__)


class DataWriteService(BaseService):
    """Create, update and delete catalog records.

    Creates return the new record ID. Updates and deletes return False when
    the record does not exist. Deletes rely on the database to cascade to
    dependent rows.
    """

    async def _delete(self, model: type, id: int) -> bool:
        """Delete a record by primary key."""
        record = await self.db.get(model, id, populate_existing=True)
        if record is None:
            return False

        await self.db.delete(record)
        await self._flush()
        logger.info("Deleted %s %s", model.__name__.lower(), id)
        return True

    # Artists

    async def create_artist(self, data: ArtistEdit) -> int:
        """Create an artist and return its ID."""
        artist = Artist(name=data.name, created_at=datetime.now(UTC))
        self.db.add(artist)
        await self._flush()
        logger.info("Created artist %s (%s)", artist.id, artist.name)
        return artist.id

    async def update_artist(self, id: int, data: ArtistEdit) -> bool:
        """Update an artist's name."""
        artist = await self.db.get(Artist, id, populate_existing=True)
        if artist is None:
            return False

        artist.name = data.name
        artist.updated_at = datetime.now(UTC)
        await self._flush()
        logger.info("Updated artist %s", id)
        return True

    async def delete_artist(self, id: int) -> bool:
        """Delete an artist along with its albums, tracks and genre links."""
        return await self._delete(Artist, id)

    # Albums

    async def create_album(self, data: AlbumEdit) -> int:
        """Create an album with its genre links and return its ID."""
        now = datetime.now(UTC)
        album = Album(
            title=data.title,
            release_year=data.release_year,
            artist_id=data.artist_id,
            created_at=now,
        )
        album.album_genres = [
            AlbumGenre(genre_id=genre_id, created_at=now) for genre_id in data.genre_ids
        ]
        self.db.add(album)
        await self._flush()
        logger.info(
            "Created album %s (%s) with %d genres", album.id, album.title, len(data.genre_ids)
        )
        return album.id

    async def update_album(self, id: int, data: AlbumEdit) -> bool:
        """Update an album and replace its genre links with data.genre_ids."""
        album = await self.db.get(
            Album, id, options=[selectinload(Album.album_genres)], populate_existing=True
        )
        if album is None:
            return False

        now = datetime.now(UTC)
        album.title = data.title
        album.release_year = data.release_year
        album.artist_id = data.artist_id
        album.updated_at = now

        # Keep surviving links so their created_at is preserved
        wanted = set(data.genre_ids)
        kept = [link for link in album.album_genres if link.genre_id in wanted]
        existing = {link.genre_id for link in kept}
        album.album_genres = kept + [
            AlbumGenre(genre_id=genre_id, created_at=now)
            for genre_id in sorted(wanted - existing)
        ]

        await self._flush()
        logger.info("Updated album %s", id)
        return True

    async def delete_album(self, id: int) -> bool:
        """Delete an album along with its tracks and genre links."""
        return await self._delete(Album, id)

    # Genres

    async def create_genre(self, data: GenreEdit) -> int:
        """Create a genre and return its ID."""
        genre = Genre(name=data.name, created_at=datetime.now(UTC))
        self.db.add(genre)
        await self._flush()
        logger.info("Created genre %s (%s)", genre.id, genre.name)
        return genre.id

    async def update_genre(self, id: int, data: GenreEdit) -> bool:
        """Update a genre's name."""
        genre = await self.db.get(Genre, id, populate_existing=True)
        if genre is None:
            return False

        genre.name = data.name
        genre.updated_at = datetime.now(UTC)
        await self._flush()
        logger.info("Updated genre %s", id)
        return True

    async def delete_genre(self, id: int) -> bool:
        """Delete a genre and unlink it from its albums."""
        return await self._delete(Genre, id)

    # Tracks

    async def create_track(self, data: TrackEdit) -> int:
        """Create a track and return its ID."""
        track = Track(
            title=data.title,
            track_number=data.track_number,
            album_id=data.album_id,
            created_at=datetime.now(UTC),
        )
        self.db.add(track)
        await self._flush()
        logger.info("Created track %s (%s) on album %s", track.id, track.title, track.album_id)
        return track.id

    async def update_track(self, id: int, data: TrackEdit) -> bool:
        """Update a track's title, number and album."""
        track = await self.db.get(Track, id, populate_existing=True)
        if track is None:
            return False

        track.title = data.title
        track.track_number = data.track_number
        track.album_id = data.album_id
        track.updated_at = datetime.now(UTC)
        await self._flush()
        logger.info("Updated track %s", id)
        return True

    async def delete_track(self, id: int) -> bool:
        """Delete a track."""
        return await self._delete(Track, id)


async def get_write_service(db: AsyncSession = Depends(get_db)) -> DataWriteService:
    """Factory function to create a write service bound to the request session.

    Can be used as a FastAPI dependency.
    """
    return DataWriteService(db)


# Type alias for use in route dependencies
WriteService = Annotated[DataWriteService, Depends(get_write_service)]
