"""Track API endpoints."""

from fastapi import APIRouter, HTTPException

from music_manager.schemas.track import TrackEdit, TrackView
from music_manager.services.read import ReadService
from music_manager.services.write import WriteService

router = APIRouter(prefix="/tracks", tags=["tracks"])


@router.get("/{track_id}", response_model=TrackView)
async def get_track(track_id: int, read: ReadService) -> TrackView:
    """Get a track with its album title."""
    track = await read.get_track_view(track_id)
    if track is None:
        raise HTTPException(status_code=404, detail="Track not found")
    return track


@router.get("/{track_id}/edit", response_model=TrackEdit)
async def get_track_edit(track_id: int, read: ReadService) -> TrackEdit:
    """Get a track in the shape accepted by update."""
    track = await read.get_track_edit(track_id)
    if track is None:
        raise HTTPException(status_code=404, detail="Track not found")
    return track


@router.post("", response_model=TrackEdit, status_code=201)
async def create_track(
    track_data: TrackEdit, read: ReadService, write: WriteService
) -> TrackEdit | None:
    """Add a track to an album."""
    track_id = await write.create_track(track_data)
    return await read.get_track_edit(track_id)


@router.put("/{track_id}", response_model=TrackEdit)
async def update_track(
    track_id: int, track_data: TrackEdit, read: ReadService, write: WriteService
) -> TrackEdit | None:
    """Update a track."""
    if not await write.update_track(track_id, track_data):
        raise HTTPException(status_code=404, detail="Track not found")
    return await read.get_track_edit(track_id)


@router.delete("/{track_id}", status_code=204)
async def delete_track(track_id: int, write: WriteService) -> None:
    """Delete a track."""
    if not await write.delete_track(track_id):
        raise HTTPException(status_code=404, detail="Track not found")
