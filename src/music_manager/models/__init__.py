"""SQLAlchemy ORM models."""

from music_manager.models.album import Album, AlbumGenre
from music_manager.models.artist import Artist
from music_manager.models.genre import Genre
from music_manager.models.track import Track

__all__ = [
    "Album",
    "AlbumGenre",
    "Artist",
    "Genre",
    "Track",
]
