"""Genre API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from music_manager.config import get_settings
from music_manager.schemas.common import NameOption, Page
from music_manager.schemas.genre import GenreEdit, GenreView
from music_manager.services.read import ReadService
from music_manager.services.write import WriteService

router = APIRouter(prefix="/genres", tags=["genres"])

settings = get_settings()


@router.get("", response_model=Page[GenreView])
async def list_genres(
    read: ReadService,
    search: str | None = Query(None, description="Case-insensitive name search"),
    sort: str | None = Query(None, description="albumcount, created, updated or name"),
    descending: bool = Query(False, description="Sort in descending order"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Items per page"
    ),
) -> Page[GenreView]:
    """List genres with the number of albums tagged with each."""
    return await read.get_genres_page(
        search=search, sort_field=sort, descending=descending, page=page, page_size=page_size
    )


@router.get("/names", response_model=list[NameOption])
async def list_genre_names(read: ReadService) -> list[NameOption]:
    """List every genre's ID and name for selection inputs."""
    return await read.get_genre_names()


@router.get("/{genre_id}", response_model=GenreView)
async def get_genre(genre_id: int, read: ReadService) -> GenreView:
    """Get a genre with its album count."""
    genre = await read.get_genre_view(genre_id)
    if genre is None:
        raise HTTPException(status_code=404, detail="Genre not found")
    return genre


@router.get("/{genre_id}/edit", response_model=GenreEdit)
async def get_genre_edit(genre_id: int, read: ReadService) -> GenreEdit:
    """Get a genre in the shape accepted by update."""
    genre = await read.get_genre_edit(genre_id)
    if genre is None:
        raise HTTPException(status_code=404, detail="Genre not found")
    return genre


@router.post("", response_model=GenreEdit, status_code=201)
async def create_genre(
    genre_data: GenreEdit, read: ReadService, write: WriteService
) -> GenreEdit | None:
    """Create a new genre."""
    genre_id = await write.create_genre(genre_data)
    return await read.get_genre_edit(genre_id)


@router.put("/{genre_id}", response_model=GenreEdit)
async def update_genre(
    genre_id: int, genre_data: GenreEdit, read: ReadService, write: WriteService
) -> GenreEdit | None:
    """Update a genre."""
    if not await write.update_genre(genre_id, genre_data):
        raise HTTPException(status_code=404, detail="Genre not found")
    return await read.get_genre_edit(genre_id)


@router.delete("/{genre_id}", status_code=204)
async def delete_genre(genre_id: int, write: WriteService) -> None:
    """Delete a genre and remove it from every album."""
    if not await write.delete_genre(genre_id):
        raise HTTPException(status_code=404, detail="Genre not found")
