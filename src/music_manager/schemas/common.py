"""Shared schemas for paginated listings and selection options."""

from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

ItemT = TypeVar("ItemT")


class PageRequest(BaseModel):
    """A 1-based page index and page size selecting a slice of a listing."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, description="Page number (1-based)")
    page_size: int = Field(default=10, description="Number of items per page")

    @field_validator("page")
    @classmethod
    def validate_page(cls, v: int) -> int:
        """Validate page is 1-based."""
        if v < 1:
            msg = "Page must be at least 1"
            raise ValueError(msg)
        return v

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate page size is positive."""
        if v < 1:
            msg = "Page size must be at least 1"
            raise ValueError(msg)
        return v

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.page_size


class Page(BaseModel, Generic[ItemT]):
    """One page of a listing together with the total number of matches."""

    total: int = Field(description="Total number of matching items")
    page: int = Field(description="Current page number")
    page_size: int = Field(description="Number of items per page")
    items: list[ItemT] = Field(default_factory=list, description="Items on this page")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages needed to show every match."""
        return ceil(self.total / self.page_size) if self.page_size else 0


class NameOption(BaseModel):
    """An id/name pair used to populate selection inputs."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Record ID")
    name: str = Field(description="Display name")

