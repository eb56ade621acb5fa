"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Music Manager API"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./music_manager.db"

    # Listing pages
    default_page_size: int = 10
    max_page_size: int = 100

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate that page sizes are positive."""
        if v < 1:
            raise ValueError("Page sizes must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_page_size_limits(self) -> "Settings":
        """Validate that the default page size fits under the maximum."""
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"DEFAULT_PAGE_SIZE ({self.default_page_size}) exceeds "
                f"MAX_PAGE_SIZE ({self.max_page_size})"
            )
        return self

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if self.database_url.startswith("sqlite") and ":memory:" in self.database_url:
            warnings.append("DATABASE_URL points to an in-memory database - data will not persist")

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
