"""Pydantic schemas for album projections."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlbumView(BaseModel):
    """Album display projection with artist name, genre names and track count."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Album ID")
    title: str = Field(description="Album title")
    release_year: int = Field(description="Year of release")
    track_count: int = Field(default=0, description="Number of tracks on the album")
    genres: list[str] = Field(default_factory=list, description="Genre names, alphabetical")
    artist_id: int = Field(description="Artist ID")
    artist_name: str = Field(description="Artist name")
    created_at: datetime = Field(description="When the album was created")
    updated_at: datetime | None = Field(default=None, description="When the album was last updated")


class AlbumEdit(BaseModel):
    """Album edit projection, accepted as-is by the write service.

    Genres are referenced by id only. Duplicate ids are collapsed and the
    list is kept sorted so a read-then-write round trip is stable.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Album ID (ignored on create)")
    title: str = Field(min_length=1, max_length=50, description="Album title")
    release_year: int = Field(description="Year of release")
    artist_id: int = Field(description="Artist ID")
    genre_ids: list[int] = Field(default_factory=list, description="Linked genre IDs")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is not blank."""
        if not v.strip():
            msg = "Title must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("genre_ids")
    @classmethod
    def normalize_genre_ids(cls, v: list[int]) -> list[int]:
        """Drop duplicate genre ids and sort the rest."""
        return sorted(set(v))
