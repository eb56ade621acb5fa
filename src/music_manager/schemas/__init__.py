"""Pydantic schemas for view and edit projections."""

from music_manager.schemas.album import AlbumEdit, AlbumView
from music_manager.schemas.artist import ArtistEdit, ArtistView
from music_manager.schemas.common import NameOption, Page, PageRequest
from music_manager.schemas.genre import GenreEdit, GenreView
from music_manager.schemas.track import TrackEdit, TrackView

__all__ = [
    # Listing schemas
    "Page",
    "PageRequest",
    "NameOption",
    # Artist schemas
    "ArtistView",
    "ArtistEdit",
    # Album schemas
    "AlbumView",
    "AlbumEdit",
    # Genre schemas
    "GenreView",
    "GenreEdit",
    # Track schemas
    "TrackView",
    "TrackEdit",
]
