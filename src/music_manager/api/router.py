"""Main API router aggregation."""

from fastapi import APIRouter

from music_manager.api.albums import router as albums_router
from music_manager.api.artists import router as artists_router
from music_manager.api.genres import router as genres_router
from music_manager.api.tracks import router as tracks_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(artists_router)
api_router.include_router(albums_router)
api_router.include_router(genres_router)
api_router.include_router(tracks_router)
