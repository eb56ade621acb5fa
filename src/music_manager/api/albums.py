"""Album API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from music_manager.config import get_settings
from music_manager.schemas.album import AlbumEdit, AlbumView
from music_manager.schemas.common import Page
from music_manager.schemas.track import TrackView
from music_manager.services.read import ReadService
from music_manager.services.write import WriteService

router = APIRouter(prefix="/albums", tags=["albums"])

settings = get_settings()


@router.get("", response_model=Page[AlbumView])
async def list_albums(
    read: ReadService,
    artist_id: int | None = Query(None, description="Only albums by this artist"),
    search: str | None = Query(None, description="Case-insensitive title or artist search"),
    sort: str | None = Query(
        None, description="trackcount, releaseyear, artistname, created, updated or title"
    ),
    descending: bool = Query(False, description="Sort in descending order"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Items per page"
    ),
) -> Page[AlbumView]:
    """List albums with artist names, genres and track counts.

    Search matches either the album title or the artist name.
    Unknown sort fields fall back to sorting by title.
    """
    return await read.get_albums_page(
        artist_id=artist_id,
        search=search,
        sort_field=sort,
        descending=descending,
        page=page,
        page_size=page_size,
    )


@router.get("/{album_id}", response_model=AlbumView)
async def get_album(album_id: int, read: ReadService) -> AlbumView:
    """Get an album with its artist, genres and track count."""
    album = await read.get_album_view(album_id)
    if album is None:
        raise HTTPException(status_code=404, detail="Album not found")
    return album


@router.get("/{album_id}/edit", response_model=AlbumEdit)
async def get_album_edit(album_id: int, read: ReadService) -> AlbumEdit:
    """Get an album in the shape accepted by update, with genre IDs."""
    album = await read.get_album_edit(album_id)
    if album is None:
        raise HTTPException(status_code=404, detail="Album not found")
    return album


@router.get("/{album_id}/tracks", response_model=list[TrackView])
async def list_album_tracks(album_id: int, read: ReadService) -> list[TrackView]:
    """List an album's tracks in track-number order."""
    if await read.get_album_edit(album_id) is None:
        raise HTTPException(status_code=404, detail="Album not found")
    return await read.get_album_tracks(album_id)


@router.post("", response_model=AlbumEdit, status_code=201)
async def create_album(
    album_data: AlbumEdit, read: ReadService, write: WriteService
) -> AlbumEdit | None:
    """Create a new album linked to the given genres.

    The album and its genre links are written in one transaction.
    """
    album_id = await write.create_album(album_data)
    return await read.get_album_edit(album_id)


@router.put("/{album_id}", response_model=AlbumEdit)
async def update_album(
    album_id: int, album_data: AlbumEdit, read: ReadService, write: WriteService
) -> AlbumEdit | None:
    """Update an album and replace its genre links."""
    if not await write.update_album(album_id, album_data):
        raise HTTPException(status_code=404, detail="Album not found")
    return await read.get_album_edit(album_id)


@router.delete("/{album_id}", status_code=204)
async def delete_album(album_id: int, write: WriteService) -> None:
    """Delete an album along with its tracks and genre links."""
    if not await write.delete_album(album_id):
        raise HTTPException(status_code=404, detail="Album not found")
