"""Pydantic schemas for track projections."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackView(BaseModel):
    """Track display projection with its album title."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Track ID")
    title: str = Field(description="Track title")
    track_number: int = Field(description="Position on the album")
    album_id: int = Field(description="Album ID")
    album_title: str = Field(description="Album title")
    created_at: datetime = Field(description="When the track was created")
    updated_at: datetime | None = Field(default=None, description="When the track was last updated")


class TrackEdit(BaseModel):
    """Track edit projection, accepted as-is by the write service."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Track ID (ignored on create)")
    title: str = Field(min_length=1, max_length=50, description="Track title")
    track_number: int = Field(description="Position on the album")
    album_id: int = Field(description="Album ID")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is not blank."""
        if not v.strip():
            msg = "Title must not be blank"
            raise ValueError(msg)
        return v
