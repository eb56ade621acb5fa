"""Database configuration with async SQLAlchemy support."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from music_manager.config import get_settings


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def unicode_lower(value: str | None) -> str | None:
    """Lowercase any text, not only ASCII letters."""
    return value.lower() if value is not None else None


def configure_sqlite(engine: AsyncEngine) -> None:
    """Prepare every new SQLite connection for the catalog queries.

    SQLite ignores ON DELETE CASCADE unless the foreign_keys pragma is set per
    connection, and its built-in lower() only folds ASCII letters. Replacing
    lower() makes case-insensitive search and name sorting work for names
    such as "Björk".
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.create_function("lower", 1, unicode_lower, deterministic=True)


settings = get_settings()

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
)
configure_sqlite(engine)

# Create async session factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession]:
    """Dependency that provides an async database session.

    Yields a session and ensures it's closed after the request.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_all() -> None:
    """Create all tables registered on the ORM metadata."""
    # Import models so every table is registered before create_all
    import music_manager.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
