"""Read service producing view and edit projections."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from music_manager.database import get_db
from music_manager.models.album import Album, AlbumGenre
from music_manager.models.artist import Artist
from music_manager.models.genre import Genre
from music_manager.models.track import Track
from music_manager.schemas.album import AlbumEdit, AlbumView
from music_manager.schemas.artist import ArtistEdit, ArtistView
from music_manager.schemas.common import NameOption, Page
from music_manager.schemas.genre import GenreEdit, GenreView
from music_manager.schemas.track import TrackEdit, TrackView
from music_manager.services.base import BaseService
from music_manager.services.listing import Listing, fetch_one, fetch_page, make_page_request

# Correlated child counts, usable both as selected columns and as sort keys
artist_album_count = (
    select(func.count(Album.id))
    .where(Album.artist_id == Artist.id)
    .correlate(Artist)
    .scalar_subquery()
)
album_track_count = (
    select(func.count(Track.id))
    .where(Track.album_id == Album.id)
    .correlate(Album)
    .scalar_subquery()
)
genre_album_count = (
    select(func.count())
    .select_from(AlbumGenre)
    .where(AlbumGenre.genre_id == Genre.id)
    .correlate(Genre)
    .scalar_subquery()
)


def artist_to_view(artist: Artist, album_count: int) -> ArtistView:
    """Convert an Artist model and its album count to ArtistView."""
    return ArtistView(
        id=artist.id,
        name=artist.name,
        album_count=album_count,
        created_at=artist.created_at,
        updated_at=artist.updated_at,
    )


def album_to_view(album: Album, track_count: int) -> AlbumView:
    """Convert an Album model and its track count to AlbumView.

    Requires album.artist and album.album_genres (with genres) to be loaded.
    """
    return AlbumView(
        id=album.id,
        title=album.title,
        release_year=album.release_year,
        track_count=track_count,
        genres=sorted(link.genre.name for link in album.album_genres),
        artist_id=album.artist_id,
        artist_name=album.artist.name,
        created_at=album.created_at,
        updated_at=album.updated_at,
    )


def genre_to_view(genre: Genre, album_count: int) -> GenreView:
    """Convert a Genre model and its album count to GenreView."""
    return GenreView(
        id=genre.id,
        name=genre.name,
        album_count=album_count,
        created_at=genre.created_at,
        updated_at=genre.updated_at,
    )


def track_to_view(track: Track) -> TrackView:
    """Convert a Track model to TrackView. Requires track.album to be loaded."""
    return TrackView(
        id=track.id,
        title=track.title,
        track_number=track.track_number,
        album_id=track.album_id,
        album_title=track.album.title,
        created_at=track.created_at,
        updated_at=track.updated_at,
    )


ARTIST_LISTING = Listing[ArtistView](
    model=Artist,
    key=Artist.id,
    aggregates=(artist_album_count,),
    search_columns=(Artist.name,),
    sort_keys={
        "albumcount": artist_album_count,
        "created": Artist.created_at,
        "updated": Artist.updated_at,
    },
    default_sort=func.lower(Artist.name),
    project=artist_to_view,
)

ALBUM_LISTING = Listing[AlbumView](
    model=Album,
    key=Album.id,
    aggregates=(album_track_count,),
    joins=(Album.artist,),
    search_columns=(Album.title, Artist.name),
    sort_keys={
        "trackcount": album_track_count,
        "releaseyear": Album.release_year,
        "artistname": func.lower(Artist.name),
        "created": Album.created_at,
        "updated": Album.updated_at,
    },
    default_sort=func.lower(Album.title),
    options=(
        contains_eager(Album.artist),
        selectinload(Album.album_genres).selectinload(AlbumGenre.genre),
    ),
    project=album_to_view,
)

GENRE_LISTING = Listing[GenreView](
    model=Genre,
    key=Genre.id,
    aggregates=(genre_album_count,),
    search_columns=(Genre.name,),
    sort_keys={
        "albumcount": genre_album_count,
        "created": Genre.created_at,
        "updated": Genre.updated_at,
    },
    default_sort=func.lower(Genre.name),
    project=genre_to_view,
)


class DataReadService(BaseService):
    """Read-only queries over the catalog.

    Single-record lookups return None when nothing matches; listing methods
    return a Page of view projections.
    """

    # Artists

    async def get_artist_view(self, id: int) -> ArtistView | None:
        """Get an artist's view projection by ID."""
        return await fetch_one(self.db, ARTIST_LISTING, id)

    async def get_artist_edit(self, id: int) -> ArtistEdit | None:
        """Get an artist's edit projection by ID."""
        artist = await self.db.get(Artist, id, populate_existing=True)
        if artist is None:
            return None
        return ArtistEdit(id=artist.id, name=artist.name)

    async def get_artists_page(
        self,
        search: str | None = None,
        sort_field: str | None = None,
        descending: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[ArtistView]:
        """List artists, optionally filtered by a name substring."""
        return await fetch_page(
            self.db,
            ARTIST_LISTING,
            make_page_request(page, page_size),
            search=search,
            sort_field=sort_field,
            descending=descending,
        )

    async def get_artist_names(self) -> list[NameOption]:
        """List every artist's id and name, ordered by name."""
        result = await self.db.execute(
            select(Artist.id, Artist.name).order_by(func.lower(Artist.name), Artist.id)
        )
        return [NameOption(id=row.id, name=row.name) for row in result]

    # Albums

    async def get_album_view(self, id: int) -> AlbumView | None:
        """Get an album's view projection by ID."""
        return await fetch_one(self.db, ALBUM_LISTING, id)

    async def get_album_edit(self, id: int) -> AlbumEdit | None:
        """Get an album's edit projection by ID, with genres as IDs."""
        album = await self.db.get(
            Album, id, options=[selectinload(Album.album_genres)], populate_existing=True
        )
        if album is None:
            return None
        return AlbumEdit(
            id=album.id,
            title=album.title,
            release_year=album.release_year,
            artist_id=album.artist_id,
            genre_ids=[link.genre_id for link in album.album_genres],
        )

    async def get_albums_page(
        self,
        artist_id: int | None = None,
        search: str | None = None,
        sort_field: str | None = None,
        descending: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[AlbumView]:
        """List albums, optionally for one artist.

        Search matches the album title or the artist name.
        """
        criteria = []
        if artist_id is not None:
            criteria.append(Album.artist_id == artist_id)

        return await fetch_page(
            self.db,
            ALBUM_LISTING,
            make_page_request(page, page_size),
            search=search,
            sort_field=sort_field,
            descending=descending,
            criteria=criteria,
        )

    async def get_album_tracks(self, album_id: int) -> list[TrackView]:
        """List an album's tracks in track-number order."""
        result = await self.db.execute(
            select(Track)
            .join(Track.album)
            .options(contains_eager(Track.album))
            .where(Track.album_id == album_id)
            .order_by(Track.track_number, Track.id)
            .execution_options(populate_existing=True)
        )
        return [track_to_view(track) for track in result.scalars().all()]

    # Genres

    async def get_genre_view(self, id: int) -> GenreView | None:
        """Get a genre's view projection by ID."""
        return await fetch_one(self.db, GENRE_LISTING, id)

    async def get_genre_edit(self, id: int) -> GenreEdit | None:
        """Get a genre's edit projection by ID."""
        genre = await self.db.get(Genre, id, populate_existing=True)
        if genre is None:
            return None
        return GenreEdit(id=genre.id, name=genre.name)

    async def get_genres_page(
        self,
        search: str | None = None,
        sort_field: str | None = None,
        descending: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[GenreView]:
        """List genres, optionally filtered by a name substring."""
        return await fetch_page(
            self.db,
            GENRE_LISTING,
            make_page_request(page, page_size),
            search=search,
            sort_field=sort_field,
            descending=descending,
        )

    async def get_genre_names(self) -> list[NameOption]:
        """List every genre's id and name, ordered by name."""
        result = await self.db.execute(
            select(Genre.id, Genre.name).order_by(func.lower(Genre.name), Genre.id)
        )
        return [NameOption(id=row.id, name=row.name) for row in result]

    # Tracks

    async def get_track_view(self, id: int) -> TrackView | None:
        """Get a track's view projection by ID."""
        result = await self.db.execute(
            select(Track)
            .join(Track.album)
            .options(contains_eager(Track.album))
            .where(Track.id == id)
            .execution_options(populate_existing=True)
        )
        track = result.scalar_one_or_none()
        if track is None:
            return None
        return track_to_view(track)

    async def get_track_edit(self, id: int) -> TrackEdit | None:
        """Get a track's edit projection by ID."""
        track = await self.db.get(Track, id, populate_existing=True)
        if track is None:
            return None
        return TrackEdit(
            id=track.id,
            title=track.title,
            track_number=track.track_number,
            album_id=track.album_id,
        )


async def get_read_service(db: AsyncSession = Depends(get_db)) -> DataReadService:
    """Factory function to create a read service bound to the request session.

    Can be used as a FastAPI dependency.
    """
    return DataReadService(db)


# Type alias for use in route dependencies
ReadService = Annotated[DataReadService, Depends(get_read_service)]
