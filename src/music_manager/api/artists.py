"""Artist API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from music_manager.config import get_settings
from music_manager.schemas.artist import ArtistEdit, ArtistView
from music_manager.schemas.common import NameOption, Page
from music_manager.services.read import ReadService
from music_manager.services.write import WriteService

router = APIRouter(prefix="/artists", tags=["artists"])

settings = get_settings()


@router.get("", response_model=Page[ArtistView])
async def list_artists(
    read: ReadService,
    search: str | None = Query(None, description="Case-insensitive name search"),
    sort: str | None = Query(None, description="albumcount, created, updated or name"),
    descending: bool = Query(False, description="Sort in descending order"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Items per page"
    ),
) -> Page[ArtistView]:
    """List artists with album counts.

    Unknown sort fields fall back to sorting by name.
    """
    return await read.get_artists_page(
        search=search, sort_field=sort, descending=descending, page=page, page_size=page_size
    )


@router.get("/names", response_model=list[NameOption])
async def list_artist_names(read: ReadService) -> list[NameOption]:
    """List every artist's ID and name for selection inputs."""
    return await read.get_artist_names()


@router.get("/{artist_id}", response_model=ArtistView)
async def get_artist(artist_id: int, read: ReadService) -> ArtistView:
    """Get an artist with its album count."""
    artist = await read.get_artist_view(artist_id)
    if artist is None:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@router.get("/{artist_id}/edit", response_model=ArtistEdit)
async def get_artist_edit(artist_id: int, read: ReadService) -> ArtistEdit:
    """Get an artist in the shape accepted by update."""
    artist = await read.get_artist_edit(artist_id)
    if artist is None:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@router.post("", response_model=ArtistEdit, status_code=201)
async def create_artist(
    artist_data: ArtistEdit, read: ReadService, write: WriteService
) -> ArtistEdit | None:
    """Create a new artist."""
    artist_id = await write.create_artist(artist_data)
    return await read.get_artist_edit(artist_id)


@router.put("/{artist_id}", response_model=ArtistEdit)
async def update_artist(
    artist_id: int, artist_data: ArtistEdit, read: ReadService, write: WriteService
) -> ArtistEdit | None:
    """Update an artist."""
    if not await write.update_artist(artist_id, artist_data):
        raise HTTPException(status_code=404, detail="Artist not found")
    return await read.get_artist_edit(artist_id)


@router.delete("/{artist_id}", status_code=204)
async def delete_artist(artist_id: int, write: WriteService) -> None:
    """Delete an artist.

    Deletes the artist and all of its albums, tracks and genre links.
    """
    if not await write.delete_artist(artist_id):
        raise HTTPException(status_code=404, detail="Artist not found")
