"""Pydantic schemas for genre projections."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenreView(BaseModel):
    """Genre display projection with the number of albums tagged with it."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Genre ID")
    name: str = Field(description="Genre name")
    album_count: int = Field(default=0, description="Number of albums in this genre")
    created_at: datetime = Field(description="When the genre was created")
    updated_at: datetime | None = Field(default=None, description="When the genre was last updated")


class GenreEdit(BaseModel):
    """Genre edit projection, accepted as-is by the write service."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Genre ID (ignored on create)")
    name: str = Field(min_length=1, max_length=20, description="Genre name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank."""
        if not v.strip():
            msg = "Name must not be blank"
            raise ValueError(msg)
        return v
