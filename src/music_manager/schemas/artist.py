"""Pydantic schemas for artist projections."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArtistView(BaseModel):
    """Artist display projection with its album count."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Artist ID")
    name: str = Field(description="Artist name")
    album_count: int = Field(default=0, description="Number of albums by this artist")
    created_at: datetime = Field(description="When the artist was created")
    updated_at: datetime | None = Field(
        default=None, description="When the artist was last updated"
    )


class ArtistEdit(BaseModel):
    """Artist edit projection, accepted as-is by the write service."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Artist ID (ignored on create)")
    name: str = Field(min_length=1, max_length=50, description="Artist name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank."""
        if not v.strip():
            msg = "Name must not be blank"
            raise ValueError(msg)
        return v
